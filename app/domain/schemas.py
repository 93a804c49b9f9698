# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from decimal import Decimal
from datetime import datetime


class ProductOut(BaseModel):
    """Product as shown in listings and detail pages."""

    id: int
    title: str
    price: Decimal
    description: str
    image_url: str | None = None

    model_config = ConfigDict(from_attributes=True)


class ProductPageOut(BaseModel):
    """One page of the catalog plus pagination metadata."""

    products: List[ProductOut]
    total_products: int
    current_page: int
    has_next_page: bool
    has_previous_page: bool
    next_page: int
    previous_page: int
    last_page: int


class CartItemIn(BaseModel):
    """Body of add-to-cart and remove-from-cart."""

    product_id: int = Field(..., gt=0, alias="productId", description="Product id (must be > 0)")

    model_config = ConfigDict(populate_by_name=True)


class CartItemOut(BaseModel):
    product: ProductOut
    quantity: int


class CartOut(BaseModel):
    user_id: int
    items: List[CartItemOut]
    total: Decimal


class CheckoutOut(BaseModel):
    """Checkout confirmation with the hosted payment session handle."""

    session_id: str
    session_url: str | None = None
    items: List[CartItemOut]
    total: Decimal


class OrderItemOut(BaseModel):
    quantity: int
    product_id: int | None = None
    title: str
    price: Decimal
    description: str

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    id: int
    user_id: int
    user_email: str
    items: List[OrderItemOut]
    total: Decimal
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserCreate(BaseModel):
    """Schema for creating a user."""

    id: int = Field(..., gt=0, description="User id (must be > 0)")
    email: str = Field(..., min_length=3, max_length=254, pattern=r"^[^@\s]+@[^@\s]+$")


class UserRead(BaseModel):
    id: int
    email: str

    model_config = ConfigDict(from_attributes=True)


class AdminProductsOut(BaseModel):
    products: List[ProductOut]
    csrf_token: str


class MessageOut(BaseModel):
    message: str
