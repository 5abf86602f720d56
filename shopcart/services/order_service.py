# shopcart/services/order_service.py
from sqlalchemy.orm import Session

from shopcart.repos.order_repo import OrderRepo


class OrderService:
    """
    Odczyt zamowien zlozonych przez checkout.
    """

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)

    def get_order(self, order_id: int, user_id: int):
        """
        Use Case: Pobranie zamówienia (Query).
        """
        order = self.repo.get_order(order_id)

        if not order:
            raise ValueError("Zamówienie nie istnieje")

        if order.user_id != user_id:
            raise PermissionError("Brak dostępu do zamówienia")

        return {
            "id": order.id,
            "user_id": order.user_id,
            "total": order.total,
            "payment_method": order.payment_method,
            "status": order.status,
            "created_at": order.created_at,
            "items": [
                {
                    "product_id": i.product_id,
                    "quantity": i.quantity,
                    "price": i.price,
                }
                for i in order.items
            ],
        }
