# shopcart/repos/product_repo.py
from collections.abc import Iterable

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from shopcart.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def fetch_one(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def fetch_many(self, product_ids: Iterable[int], refresh: bool = False) -> dict[int, ProductModel]:
        """
        Jedno zapytanie WHERE id IN (...) dla calego zbioru id.
        Brakujace id po prostu nie wystepuja w wyniku.
        """
        ids = set(product_ids)
        if not ids:
            return {}

        stmt = select(ProductModel).where(ProductModel.id.in_(ids))
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)

        return {p.id: p for p in self.db.execute(stmt).scalars()}

    def decrement_stock(self, product_id: int, quantity: int) -> bool:
        #UPDATE ... WHERE stock >= quantity, 0 rows = ktos inny juz wykupil stan
        stmt = (
            update(ProductModel)
            .where(ProductModel.id == product_id, ProductModel.stock >= quantity)
            .values(stock=ProductModel.stock - quantity)
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        return result.rowcount > 0
