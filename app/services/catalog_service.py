# app/services/catalog_service.py
import math
from typing import Any, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.domain.exceptions import NotFoundError, UpstreamError
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


def parse_page(raw: Any) -> int:
    """Coerce a ?page= value, anything missing or below 1 means page 1."""
    try:
        page = int(raw)
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1


class CatalogService:
    """Read side of the product catalog, no mutations here."""

    def __init__(self, db: Session, page_size: int):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.repo = ProductRepo(db)
        self.page_size = page_size

    def list_products(self, page: Any = None) -> Dict[str, Any]:
        page = parse_page(page)

        offset = (page - 1) * self.page_size
        try:
            total = self.repo.count_products()
            # past the last page: no query, huge offsets overflow the driver
            products = [] if offset >= total else self.repo.list_products(
                offset=offset,
                limit=self.page_size,
            )
        except SQLAlchemyError as e:
            logger.error(f"Listing products failed on page {page}: {e}")
            raise UpstreamError("Could not load products") from e

        return {
            "products": products,
            "total_products": total,
            "current_page": page,
            "has_next_page": self.page_size * page < total,
            "has_previous_page": page > 1,
            "next_page": page + 1,
            "previous_page": page - 1,
            "last_page": math.ceil(total / self.page_size),
        }

    def get_product(self, product_id: int) -> ProductModel:
        try:
            product = self.repo.get_product(product_id)
        except SQLAlchemyError as e:
            logger.error(f"Loading product {product_id} failed: {e}")
            raise UpstreamError("Could not load product") from e

        if product is None:
            raise NotFoundError(f"Product {product_id} not found")
        return product
