# shopcart/repos/discount_repo.py
from datetime import date

from sqlalchemy import select
from sqlalchemy.orm import Session

from shopcart.data.models.discount_code import DiscountCodeModel


class DiscountRepo:
    def __init__(self, db: Session):
        self.db = db

    def find_active(self, code: str, today: date) -> DiscountCodeModel | None:
        #expires > today, kod wygasajacy dzisiaj jest juz niewazny
        stmt = select(DiscountCodeModel).where(
            DiscountCodeModel.code == code,
            DiscountCodeModel.expires > today,
        )
        return self.db.execute(stmt).scalar_one_or_none()
