# shopcart/services/checkout_service.py
from decimal import Decimal

from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shopcart.domain.cart_state import CartState
from shopcart.domain.errors import CartError, Outcome
from shopcart.repos.order_repo import OrderRepo
from shopcart.repos.product_repo import ProductRepo
from shopcart.repos.transaction import DB_ABORT_DETAIL, TransactionScope
from shopcart.services.notification_service import NotificationService
from shopcart.services.pricing_service import PricingService, apply_discount, sum_lines
from shopcart.services.session_store import CartSession
from shopcart.utils.validators import parse_positive_int, parse_payment_method
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


class CheckoutService:
    """
    Zamiana koszyka w zamowienie jedna transakcja:

    1. walidacja wejscia i sumy (bez zapisow)
    2. pobranie produktow jednym zapytaniem + snapshot cen
    3. warunkowe zmniejszenie stanu dla kazdej pozycji
    4. insert zamowienia (suma po rabacie)
    5. insert pozycji z cena ze snapshotu
    6. commit i czyszczenie koszyka, albo rollback i koszyk bez zmian

    Brak automatycznych ponowien - InsufficientStock wraca do wolajacego.
    """

    def __init__(self, db: Session, notification_service: NotificationService | None = None):
        self.db = db
        self.products = ProductRepo(db)
        self.orders = OrderRepo(db)
        self.pricing = PricingService(db)
        self.notification_service = notification_service or NotificationService()

    def checkout(self, session: CartSession, user_id, payment_method) -> Outcome:
        user_id = parse_positive_int(user_id)
        payment_method = parse_payment_method(payment_method)
        if user_id is None or payment_method is None:
            return Outcome.failure(CartError.INVALID_INPUT, "Nieprawidłowy użytkownik lub metoda płatności")

        state = session.load()
        try:
            final_total = self.pricing.final_total(state)
        except SQLAlchemyError as e:
            logger.error(f"Checkout total lookup failed: {e}")
            return Outcome.failure(CartError.TRANSACTION_ABORTED, DB_ABORT_DETAIL)
        if final_total <= 0:
            logger.info(f"Checkout rejected for session {session.session_id}: empty or zero cart")
            return Outcome.failure(CartError.EMPTY_OR_ZERO_CART, "Koszyk jest pusty")

        logger.info(f"Checkout started for user {user_id}, session {session.session_id}")

        with TransactionScope(self.db) as tx:
            order_id = self._run(tx, state, user_id, payment_method)

        if not tx.committed:
            logger.warning(f"Checkout for user {user_id} rolled back: {tx.error.value} ({tx.detail})")
            return Outcome.failure(tx.error, tx.detail)

        logger.info(f"Order {order_id} created for user {user_id}")
        try:
            session.clear()
        except RedisError as e:
            logger.error(f"Order {order_id} committed but session {session.session_id} was not cleared: {e}")

        try:
            self.notification_service.send_order_notification(user_id, order_id)
        except Exception as e:
            # zamowienie juz zacommitowane - blad brokera nie moze zmienic wyniku
            logger.error(f"Order {order_id} notification failed: {e}")
        return Outcome.success(order_id=order_id)

    def _run(self, tx: TransactionScope, state: CartState, user_id: int, payment_method: str) -> int | None:
        if tx.aborted:
            return None

        entries = state.items()

        try:
            products = self.products.fetch_many(state.product_ids(), refresh=True)
        except SQLAlchemyError as e:
            logger.error(f"Product fetch failed: {e}")
            tx.abort(CartError.TRANSACTION_ABORTED, DB_ABORT_DETAIL)
            return None
        # snapshot cen - nie czytamy ich ponownie po zmianie stanu
        prices: dict[int, Decimal] = {pid: p.price for pid, p in products.items()}

        for product_id, quantity in entries:
            if product_id not in prices:
                tx.abort(CartError.PRODUCT_NOT_FOUND, f"Produkt {product_id} nie istnieje")
                return None
            try:
                decremented = self.products.decrement_stock(product_id, quantity)
            except SQLAlchemyError as e:
                logger.error(f"Stock update failed for product {product_id}: {e}")
                tx.abort(CartError.TRANSACTION_ABORTED, DB_ABORT_DETAIL)
                return None
            if not decremented:
                tx.abort(CartError.INSUFFICIENT_STOCK, f"Niewystarczający stan produktu {product_id}")
                return None

        total = apply_discount(sum_lines(prices, entries), state.discount)

        try:
            order = self.orders.create_order(user_id, total, payment_method)
        except SQLAlchemyError as e:
            logger.error(f"Order insert failed: {e}")
            tx.abort(CartError.ORDER_CREATION_FAILED, "Nie udało się utworzyć zamówienia")
            return None

        for product_id, quantity in entries:
            try:
                self.orders.add_order_item(order.id, product_id, quantity, prices[product_id])
            except SQLAlchemyError as e:
                logger.error(f"Order item insert failed for product {product_id}: {e}")
                tx.abort(CartError.ORDER_ITEM_CREATION_FAILED, "Nie udało się dodać pozycji zamówienia")
                return None

        return order.id
