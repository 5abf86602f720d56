# shopcart/services/notification_service.py
from shopcart.celery_worker import celery_app
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Serwis do wysyłania powiadomień.
    Używa Celery do asynchronicznego przetwarzania.
    """

    @staticmethod
    def send_order_notification(user_id: int, order_id: int):
        """
        Wysyła powiadomienie o złożeniu zamówienia (tylko po commit).
        """
        send_order_notification_task.delay(user_id, order_id)


@celery_app.task(name="shopcart.services.notification_service.send_order_notification_task")
def send_order_notification_task(user_id: int, order_id: int):
    logger.info(f"[NOTIFICATION] User {user_id}: Order {order_id} placed, status pending")
    return {"user_id": user_id, "order_id": order_id, "status": "sent"}
