# shopcart/services/discount_service.py
from datetime import date

from sqlalchemy.orm import Session

from shopcart.domain.cart_state import CartState
from shopcart.domain.errors import CartError, Outcome
from shopcart.repos.discount_repo import DiscountRepo
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


class DiscountService:
    def __init__(self, db: Session):
        self.repo = DiscountRepo(db)

    def apply(self, state: CartState, code, today: date | None = None) -> Outcome:
        """
        Aktywuje kod rabatowy na koszyku (tylko w pamieci, zapis robi wolajacy).
        Kod musi istniec i miec expires > dzisiaj.
        """
        code = code.strip() if isinstance(code, str) else ""
        if not code:
            return Outcome.failure(CartError.DISCOUNT_INVALID_OR_EXPIRED, "Pusty kod rabatowy")

        discount = self.repo.find_active(code, today or date.today())
        if discount is None:
            logger.info(f"Discount code {code!r} invalid or expired")
            return Outcome.failure(CartError.DISCOUNT_INVALID_OR_EXPIRED, "Nieprawidłowy lub wygasły kod rabatowy")

        state.discount = discount.percentage
        logger.info(f"Discount code {code!r} applied ({discount.percentage}%)")
        return Outcome.success()
