# shopcart/services/pricing_service.py
from collections.abc import Iterable
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy.orm import Session

from shopcart.domain.cart_state import CartState
from shopcart.repos.product_repo import ProductRepo

CENT = Decimal("0.01")


def line_total(price: Decimal, quantity: int) -> Decimal:
    return Decimal(price) * quantity


def apply_discount(total: Decimal, discount: int | None) -> Decimal:
    """Odejmuje procent rabatu i zaokragla do groszy (half-up)."""
    if discount:
        total = total - total * (Decimal(discount) / Decimal(100))
    return total.quantize(CENT, rounding=ROUND_HALF_UP)


def sum_lines(prices: dict[int, Decimal], entries: Iterable[tuple[int, int]]) -> Decimal:
    #pozycje bez produktu w prices sa pomijane (usuniety produkt = 0)
    return sum(
        (line_total(prices[pid], qty) for pid, qty in entries if pid in prices),
        Decimal("0.00"),
    )


class PricingService:
    def __init__(self, db: Session):
        self.products = ProductRepo(db)

    def raw_total(self, state: CartState) -> Decimal:
        if state.is_empty:
            return Decimal("0.00")
        products = self.products.fetch_many(state.product_ids())
        prices = {pid: p.price for pid, p in products.items()}
        return sum_lines(prices, state.items())

    def final_total(self, state: CartState) -> Decimal:
        return apply_discount(self.raw_total(state), state.discount)
