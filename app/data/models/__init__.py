# import all models so SQLAlchemy registers them in Base.metadata

from app.data.models.product import ProductModel
from app.data.models.cart_item import CartItemModel
from app.data.models.user import UserModel
from app.data.models.order import OrderModel, OrderItemModel

__all__ = ["ProductModel", "CartItemModel", "UserModel", "OrderModel", "OrderItemModel"]
