from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.data.database import Base
from app.data.models.cart_item import CartItemModel


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(String, nullable=False, unique=True)

    cart_items = relationship(
        "CartItemModel",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="CartItemModel.id",
    )

    def add_to_cart(self, product) -> CartItemModel:
        """Insert the product with quantity 1 or bump the existing line."""
        for item in self.cart_items:
            if item.product_id == product.id:
                item.quantity += 1
                return item

        item = CartItemModel(product_id=product.id, product=product, quantity=1)
        self.cart_items.append(item)
        return item

    def remove_from_cart(self, product_id: int) -> bool:
        for item in list(self.cart_items):
            if item.product_id == product_id:
                self.cart_items.remove(item)
                return True
        return False

    def clear_cart(self) -> None:
        self.cart_items.clear()
