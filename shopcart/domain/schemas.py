# shopcart/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from decimal import Decimal
from datetime import datetime

from shopcart.utils.validators import MAX_INT


class ItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: int = Field(..., gt=0, le=MAX_INT, description="ID produktu (musi być > 0)")
    quantity: int = Field(..., gt=0, le=MAX_INT, description="Ilość produktu (musi być > 0)")


class DiscountIn(BaseModel):
    """Schema dla kodu rabatowego."""

    code: str = Field(..., max_length=50, description="Kod rabatowy")


class CheckoutIn(BaseModel):
    """Schema dla finalizacji zakupu."""

    user_id: int = Field(..., gt=0, le=MAX_INT, description="ID użytkownika (musi być > 0)")
    payment_method: str = Field(..., min_length=1, max_length=50, description="Metoda płatności")


class CartLineOut(BaseModel):
    """Pozycja koszyka (response)."""

    product_id: int
    name: str
    price: Decimal
    quantity: int
    subtotal: Decimal


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    items: List[CartLineOut]
    total: Decimal
    discount: int | None = None
    final_total: Decimal


class TotalOut(BaseModel):
    total: Decimal


class ResultOut(BaseModel):
    ok: bool
    detail: str | None = None


class CheckoutOut(BaseModel):
    order_id: int


class OrderItemOut(BaseModel):
    product_id: int
    quantity: int
    price: Decimal

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    """Schema dla zamówienia (response)."""

    id: int
    user_id: int
    total: Decimal
    payment_method: str
    status: str
    created_at: datetime
    items: List[OrderItemOut]

    model_config = ConfigDict(from_attributes=True)
