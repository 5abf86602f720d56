#shopcart/api/routers/cart.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shopcart.api.deps import get_cart_session
from shopcart.data.database import get_db
from shopcart.domain.errors import CartError, Outcome
from shopcart.domain.schemas import (
    CartLineOut,
    CartOut,
    CheckoutIn,
    CheckoutOut,
    DiscountIn,
    ItemIn,
    ResultOut,
    TotalOut,
)
from shopcart.services.cart_service import CartService
from shopcart.services.session_store import CartSession

router = APIRouter(tags=["cart"])

STATUS_CODES = {
    CartError.INVALID_INPUT: 400,
    CartError.OUT_OF_STOCK: 409,
    CartError.EMPTY_OR_ZERO_CART: 400,
    CartError.PRODUCT_NOT_FOUND: 404,
    CartError.INSUFFICIENT_STOCK: 409,
    CartError.ORDER_CREATION_FAILED: 500,
    CartError.ORDER_ITEM_CREATION_FAILED: 500,
    CartError.DISCOUNT_INVALID_OR_EXPIRED: 400,
    CartError.TRANSACTION_ABORTED: 503,
}


def get_service(db: Session):
    return CartService(db)


def _raise_for(outcome: Outcome):
    if not outcome:
        raise HTTPException(
            status_code=STATUS_CODES[outcome.error],
            detail={"error": outcome.error.value, "message": outcome.detail},
        )


@router.get("/cart", response_model=CartOut)
def get_cart(session: CartSession = Depends(get_cart_session), db: Session = Depends(get_db)):
    summary = get_service(db).get_cart_summary(session)
    return {
        "items": [
            CartLineOut(
                product_id=line.product.id,
                name=line.product.name,
                price=line.product.price,
                quantity=line.quantity,
                subtotal=line.subtotal,
            )
            for line in summary.lines
        ],
        "total": summary.total,
        "discount": summary.discount,
        "final_total": summary.final_total,
    }


@router.post("/cart/items", response_model=ResultOut)
def add_item(
    payload: ItemIn,
    session: CartSession = Depends(get_cart_session),
    db: Session = Depends(get_db),
):
    outcome = get_service(db).add_to_cart(session, payload.product_id, payload.quantity)
    _raise_for(outcome)
    return {"ok": True, "detail": "Dodano do koszyka"}


@router.delete("/cart", response_model=ResultOut)
def clear_cart(session: CartSession = Depends(get_cart_session), db: Session = Depends(get_db)):
    get_service(db).clear(session)
    return {"ok": True}


@router.get("/cart/total", response_model=TotalOut)
def get_total(session: CartSession = Depends(get_cart_session), db: Session = Depends(get_db)):
    return {"total": get_service(db).get_total(session)}


@router.get("/cart/final-total", response_model=TotalOut)
def get_final_total(session: CartSession = Depends(get_cart_session), db: Session = Depends(get_db)):
    return {"total": get_service(db).get_final_total(session)}


@router.post("/cart/discount", response_model=ResultOut)
def apply_discount(
    payload: DiscountIn,
    session: CartSession = Depends(get_cart_session),
    db: Session = Depends(get_db),
):
    outcome = get_service(db).apply_discount(session, payload.code)
    _raise_for(outcome)
    return {"ok": True, "detail": "Rabat naliczony"}


@router.delete("/cart/discount", response_model=ResultOut)
def clear_discount(session: CartSession = Depends(get_cart_session), db: Session = Depends(get_db)):
    get_service(db).clear_discount(session)
    return {"ok": True}


@router.post("/checkout", response_model=CheckoutOut, status_code=201)
def checkout(
    payload: CheckoutIn,
    session: CartSession = Depends(get_cart_session),
    db: Session = Depends(get_db),
):
    """
    Składa zamówienie z koszyka w jednej transakcji.
    Przy InsufficientStock nic nie jest zapisywane, koszyk zostaje bez zmian.
    """
    outcome = get_service(db).checkout(session, payload.user_id, payload.payment_method)
    _raise_for(outcome)
    return {"order_id": outcome.order_id}
