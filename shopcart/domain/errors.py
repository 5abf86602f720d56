# shopcart/domain/errors.py
from dataclasses import dataclass
from enum import Enum


class CartError(str, Enum):
    INVALID_INPUT = "InvalidInput"
    OUT_OF_STOCK = "OutOfStock"
    EMPTY_OR_ZERO_CART = "EmptyOrZeroCart"
    PRODUCT_NOT_FOUND = "ProductNotFound"
    INSUFFICIENT_STOCK = "InsufficientStock"
    ORDER_CREATION_FAILED = "OrderCreationFailed"
    ORDER_ITEM_CREATION_FAILED = "OrderItemCreationFailed"
    DISCOUNT_INVALID_OR_EXPIRED = "DiscountInvalidOrExpired"
    TRANSACTION_ABORTED = "TransactionAborted"


@dataclass(frozen=True)
class Outcome:
    """
    Wynik operacji na koszyku.
    Bledy biznesowe nie sa wyjatkami - wolajacy dostaje rodzaj bledu i opis.
    """

    error: CartError | None = None
    detail: str | None = None
    order_id: int | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, order_id: int | None = None) -> "Outcome":
        return cls(order_id=order_id)

    @classmethod
    def failure(cls, error: CartError, detail: str | None = None) -> "Outcome":
        return cls(error=error, detail=detail)
