# app/services/cart_service.py
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.user import UserModel
from app.domain.exceptions import NotFoundError, UpstreamError
from app.repos.product_repo import ProductRepo
from app.repos.user_repo import UserRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


def cart_total(items: List[Dict[str, Any]]) -> Decimal:
    return sum((i["product"].price * i["quantity"] for i in items), Decimal("0.00"))


class CartService:
    """
    Cart kept on the user row.
    commands (add, remove) change it, get_cart only reads.
    There is no locking, two concurrent writes on one cart: last one wins.
    """

    def __init__(self, db: Session):
        self.user_repo = UserRepo(db)
        self.product_repo = ProductRepo(db)

    # query
    def resolve_items(self, user: UserModel) -> List[Dict[str, Any]]:
        """Cart lines joined with their product records."""
        try:
            return [
                {"product": item.product, "quantity": item.quantity}
                for item in user.cart_items
                if item.product is not None
            ]
        except SQLAlchemyError as e:
            logger.error(f"Loading cart of user {user.id} failed: {e}")
            raise UpstreamError("Could not load cart") from e

    def get_cart(self, user: UserModel) -> Dict[str, Any]:
        items = self.resolve_items(user)
        return {
            "user_id": user.id,
            "items": items,
            "total": cart_total(items),
        }

    # commands
    def add_to_cart(self, user: UserModel, product_id: int) -> Dict[str, Any]:
        try:
            product = self.product_repo.get_product(product_id)
        except SQLAlchemyError as e:
            logger.error(f"Loading product {product_id} failed: {e}")
            raise UpstreamError("Could not load product") from e

        if product is None:
            raise NotFoundError(f"Product {product_id} not found")

        item = user.add_to_cart(product)
        try:
            self.user_repo.save(user)
        except SQLAlchemyError as e:
            self.user_repo.rollback()
            logger.error(f"Saving cart of user {user.id} failed: {e}")
            raise UpstreamError("Could not update cart") from e

        logger.info(f"Product {product_id} in cart of user {user.id}, quantity {item.quantity}")
        return self.get_cart(user)

    def remove_from_cart(self, user: UserModel, product_id: int) -> Dict[str, Any]:
        if not user.remove_from_cart(product_id):
            logger.info(f"Product {product_id} not in cart of user {user.id}, nothing to remove")
            return self.get_cart(user)

        try:
            self.user_repo.save(user)
        except SQLAlchemyError as e:
            self.user_repo.rollback()
            logger.error(f"Saving cart of user {user.id} failed: {e}")
            raise UpstreamError("Could not update cart") from e

        logger.info(f"Product {product_id} removed from cart of user {user.id}")
        return self.get_cart(user)
