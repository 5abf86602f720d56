# shopcart/domain/cart_state.py
from pydantic import BaseModel, Field


class CartState(BaseModel):
    """
    Agregat koszyka trzymany w sesji: pozycje (product_id -> quantity)
    i aktywny rabat w jednym obiekcie, zeby sie nie rozjechaly.
    """

    entries: dict[int, int] = Field(default_factory=dict)
    discount: int | None = Field(default=None, gt=0, le=100)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def add(self, product_id: int, quantity: int) -> None:
        self.entries[product_id] = self.entries.get(product_id, 0) + quantity

    def product_ids(self) -> list[int]:
        return list(self.entries)

    def items(self) -> list[tuple[int, int]]:
        #stala kolejnosc (rosnace id) - ta sama kolejnosc blokowania wierszy w checkout
        return sorted(self.entries.items())

    def clear(self) -> None:
        self.entries = {}
        self.discount = None
