# app/services/admin_service.py
import hashlib
import hmac

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.exceptions import ForbiddenError, NotFoundError, UpstreamError
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


def csrf_token_for(user_id: int, secret: str) -> str:
    return hmac.new(secret.encode(), str(user_id).encode(), hashlib.sha256).hexdigest()


class AdminService:
    def __init__(self, db: Session, csrf_secret: str):
        self.repo = ProductRepo(db)
        self.csrf_secret = csrf_secret

    def csrf_token(self, user_id: int) -> str:
        return csrf_token_for(user_id, self.csrf_secret)

    def verify_csrf(self, user_id: int, token: str | None) -> None:
        if not token or not hmac.compare_digest(token, self.csrf_token(user_id)):
            raise ForbiddenError("Invalid CSRF token")

    def list_products(self):
        try:
            return self.repo.list_all()
        except SQLAlchemyError as e:
            logger.error(f"Listing products failed: {e}")
            raise UpstreamError("Could not load products") from e

    def delete_product(self, user_id: int, product_id: int, token: str | None) -> None:
        self.verify_csrf(user_id, token)

        try:
            product = self.repo.get_product(product_id)
            if product is None:
                raise NotFoundError(f"Product {product_id} not found")
            self.repo.delete_product(product)
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.error(f"Deleting product {product_id} failed: {e}")
            raise UpstreamError("Deleting product failed") from e

        logger.info(f"Product {product_id} deleted by user {user_id}")
