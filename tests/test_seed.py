from sqlalchemy import func, select

from shopcart.data.models import DiscountCodeModel, ProductModel
from shopcart.data.seed import PRODUCTS, seed


def test_seed_is_idempotent(session_factory):
    seed(session_factory)
    seed(session_factory)

    with session_factory() as s:
        assert s.execute(select(func.count()).select_from(ProductModel)).scalar_one() == len(PRODUCTS)
        assert s.execute(select(func.count()).select_from(DiscountCodeModel)).scalar_one() == 1
