# app/repos/product_repo.py
from sqlalchemy import select, func, delete
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.data.models.cart_item import CartItemModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def count_products(self) -> int:
        return self.db.execute(select(func.count(ProductModel.id))).scalar_one()

    def list_products(self, offset: int, limit: int) -> list[ProductModel]:
        stmt = select(ProductModel).order_by(ProductModel.id).offset(offset).limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def list_all(self) -> list[ProductModel]:
        return list(self.db.execute(select(ProductModel).order_by(ProductModel.id)).scalars().all())

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete_product(self, product: ProductModel) -> None:
        # cart lines pointing at the product go with it, orders keep their snapshot
        self.db.execute(delete(CartItemModel).where(CartItemModel.product_id == product.id))
        self.db.delete(product)
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
