# app/services/order_service.py
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.order import OrderModel, OrderItemModel
from app.data.models.user import UserModel
from app.domain.exceptions import UpstreamError
from app.repos.order_repo import OrderRepo
from app.repos.user_repo import UserRepo
from app.services.cart_service import CartService
from app.services.notification_service import NotificationService
from app.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Turns carts into orders and reads them back.
    Kept apart from CartService, it only reads the cart and clears it.
    """

    def __init__(
        self,
        db: Session,
        cart_service: CartService | None = None,
        notification_service: NotificationService | None = None,
    ):
        self.repo = OrderRepo(db)
        self.user_repo = UserRepo(db)
        self.cart_service = cart_service or CartService(db)
        self.notification_service = notification_service or NotificationService()

    def finalize_order(self, user: UserModel) -> OrderModel:
        """
        Use case: place an order from the current cart.

        1. Resolve the cart lines to products
        2. Copy every product into an order line (snapshot)
        3. Persist the order
        4. Clear the cart, only once the order is stored
        5. Queue the notification, errors are only logged

        Not idempotent: calling it again after the cart was cleared stores
        an order without lines.
        """
        items = self.cart_service.resolve_items(user)

        order = OrderModel(
            user_id=user.id,
            user_email=user.email,
            items=[
                OrderItemModel(
                    position=n,
                    quantity=i["quantity"],
                    product_id=i["product"].id,
                    title=i["product"].title,
                    price=i["product"].price,
                    description=i["product"].description or "",
                    image_url=i["product"].image_url,
                )
                for n, i in enumerate(items)
            ],
        )

        try:
            created = self.repo.create_order(order)
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Storing order for user {user.id} failed, cart left intact: {e}")
            raise UpstreamError("Could not store order") from e

        logger.info(f"Order {created.id} created for user {user.id} with {len(items)} lines")

        try:
            user.clear_cart()
            self.user_repo.save(user)
        except SQLAlchemyError as e:
            self.user_repo.rollback()
            logger.error(f"Clearing cart of user {user.id} after order {created.id} failed: {e}")
            raise UpstreamError("Could not clear cart") from e

        # the order is stored and the cart cleared, failing now would invite a second order
        try:
            self.notification_service.send_order_notification(user.id, created.id)
        except Exception as e:
            logger.error(f"Notification for order {created.id} failed: {e}")

        return created

    def list_orders(self, user: UserModel) -> List[OrderModel]:
        try:
            return self.repo.list_orders_for_user(user.id)
        except SQLAlchemyError as e:
            logger.error(f"Listing orders of user {user.id} failed: {e}")
            raise UpstreamError("Could not load orders") from e
