# shopcart/repos/order_repo.py
from decimal import Decimal

from sqlalchemy.orm import Session

from shopcart.data.models.order import OrderModel
from shopcart.data.models.order_item import OrderItemModel
from shopcart.domain.enums import OrderStatus


class OrderRepo:
    """Zapisy w ramach otwartej transakcji - flush zamiast commit, commit robi TransactionScope."""

    def __init__(self, db: Session):
        self.db = db

    def create_order(self, user_id: int, total: Decimal, payment_method: str) -> OrderModel:
        order = OrderModel(
            user_id=user_id,
            total=total,
            payment_method=payment_method,
            status=OrderStatus.PENDING.value,
        )
        self.db.add(order)
        self.db.flush()
        return order

    def add_order_item(self, order_id: int, product_id: int, quantity: int, price: Decimal) -> OrderItemModel:
        item = OrderItemModel(
            order_id=order_id,
            product_id=product_id,
            quantity=quantity,
            price=price,
        )
        self.db.add(item)
        self.db.flush()
        return item

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.db.get(OrderModel, order_id)
