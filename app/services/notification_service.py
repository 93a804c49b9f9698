# app/services/notification_service.py
from kombu.exceptions import OperationalError

from app.celery_worker import celery_app
from app.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Order-placed notifications, delivered by a Celery worker.
    Dispatch is best effort: a stored order never fails because the
    broker is unreachable.
    """

    @staticmethod
    def send_order_notification(user_id: int, order_id: int) -> bool:
        """
        Queue the notification, False when the broker refused it.
        """
        try:
            send_order_notification_task.delay(user_id, order_id)
        except OperationalError as e:
            logger.error(f"Broker unavailable, notification for order {order_id} dropped: {e}")
            return False
        logger.info(f"Notification for order {order_id} queued")
        return True


@celery_app.task(name="app.services.notification_service.send_order_notification_task")
def send_order_notification_task(user_id: int, order_id: int):
    logger.info(f"[NOTIFICATION] User {user_id}: Order {order_id} has been placed")
    return {"user_id": user_id, "order_id": order_id, "status": "sent"}
