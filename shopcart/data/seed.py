# shopcart/data/seed.py
from datetime import date, timedelta
from decimal import Decimal

from shopcart.data.database import SessionLocal
from shopcart.data.models import ProductModel, DiscountCodeModel
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCTS = [
    {"name": "Keyboard", "price": Decimal("199.99"), "stock": 25},
    {"name": "Mouse", "price": Decimal("49.50"), "stock": 100},
    {"name": "Monitor", "price": Decimal("899.00"), "stock": 5},
]


def seed(session_factory=SessionLocal):
    db = session_factory()
    try:
        # not forcing: only seed if empty
        if db.query(ProductModel).first():
            return
        db.add_all(ProductModel(**p) for p in PRODUCTS)
        db.add(DiscountCodeModel(code="WELCOME10", percentage=10, expires=date.today() + timedelta(days=30)))
        db.commit()
        logger.info(f"Seeded {len(PRODUCTS)} products and 1 discount code")
    finally:
        db.close()
