# shopcart/data/models/discount_code.py
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Date, DateTime, CheckConstraint

from shopcart.data.database import Base


class DiscountCodeModel(Base):
    __tablename__ = "discount_codes"

    id = Column(Integer, primary_key=True)
    code = Column(String(50), nullable=False, unique=True)
    percentage = Column(Integer, nullable=False)
    expires = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        CheckConstraint("percentage > 0 AND percentage <= 100", name="ck_discount_codes_percentage"),
    )
