# shopcart/services/cart_service.py
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from shopcart.data.models.product import ProductModel
from shopcart.domain.cart_state import CartState
from shopcart.domain.errors import CartError, Outcome
from shopcart.repos.product_repo import ProductRepo
from shopcart.services.checkout_service import CheckoutService
from shopcart.services.discount_service import DiscountService
from shopcart.services.pricing_service import PricingService, apply_discount, line_total
from shopcart.services.session_store import CartSession
from shopcart.utils.validators import parse_positive_int
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CartLine:
    product: ProductModel
    quantity: int
    subtotal: Decimal


@dataclass(frozen=True)
class CartSummary:
    lines: list[CartLine]
    total: Decimal
    discount: int | None
    final_total: Decimal


class CartService:
    """
    Use case'y koszyka w sesji.
    commands (add, apply_discount, clear, checkout) zmieniaja stan sesji
    query (contents, total, final_total) tylko odczyt
    """

    def __init__(self, db: Session):
        self.products = ProductRepo(db)
        self.pricing = PricingService(db)
        self.discounts = DiscountService(db)
        self.checkout_service = CheckoutService(db)

    #query - odczyt
    def get_cart_contents(self, session: CartSession) -> list[CartLine]:
        return self._lines(session.session_id, session.load())

    def get_cart_summary(self, session: CartSession) -> CartSummary:
        """Pozycje i sumy z jednego odczytu sesji."""
        state = session.load()
        lines = self._lines(session.session_id, state)
        total = sum((line.subtotal for line in lines), Decimal("0.00"))
        return CartSummary(lines, total, state.discount, apply_discount(total, state.discount))

    def _lines(self, session_id: str, state: CartState) -> list[CartLine]:
        if state.is_empty:
            return []

        products = self.products.fetch_many(state.product_ids())
        lines = []
        for product_id, quantity in state.items():
            product = products.get(product_id)
            if product is None:
                #usuniety produkt wypada z koszyka po cichu, tak samo liczy sie suma
                logger.warning(f"Product {product_id} in session {session_id} no longer exists, skipping")
                continue
            lines.append(CartLine(product, quantity, line_total(product.price, quantity)))
        return lines

    def get_total(self, session: CartSession) -> Decimal:
        return self.pricing.raw_total(session.load())

    def get_final_total(self, session: CartSession) -> Decimal:
        return self.pricing.final_total(session.load())

    #commands
    def add_to_cart(self, session: CartSession, product_id, quantity) -> Outcome:
        product_id = parse_positive_int(product_id)
        quantity = parse_positive_int(quantity)
        if product_id is None or quantity is None:
            return Outcome.failure(CartError.INVALID_INPUT, "Ilość i ID produktu muszą być dodatnie")

        # sprawdzenie stanu tylko doradcze, nie rezerwuje towaru - wiazaco sprawdza checkout
        product = self.products.fetch_one(product_id)
        if product is None or product.stock < quantity:
            logger.info(f"Product {product_id} out of stock for quantity {quantity}")
            return Outcome.failure(CartError.OUT_OF_STOCK, f"Brak wystarczającego stanu produktu {product_id}")

        state = session.load()
        state.add(product_id, quantity)
        session.save(state)

        logger.info(
            f"Product {product_id} x{quantity} added to session {session.session_id}, "
            f"now {state.entries[product_id]}"
        )
        return Outcome.success()

    def apply_discount(self, session: CartSession, code, today: date | None = None) -> Outcome:
        state = session.load()
        outcome = self.discounts.apply(state, code, today=today)
        if outcome:
            session.save(state)
        return outcome

    def clear_discount(self, session: CartSession) -> None:
        state = session.load()
        state.discount = None
        session.save(state)

    def clear(self, session: CartSession) -> None:
        session.clear()

    def checkout(self, session: CartSession, user_id, payment_method) -> Outcome:
        return self.checkout_service.checkout(session, user_id, payment_method)
