# app/api/routers/cart.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.schemas import CartItemIn, CartOut
from app.services.cart_service import CartService

router = APIRouter(tags=["cart"])


@router.get("/cart", response_model=CartOut)
def get_cart(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return CartService(db).get_cart(user)


@router.post("/cart", response_model=CartOut)
def post_cart(
    payload: CartItemIn,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return CartService(db).add_to_cart(user, payload.product_id)


@router.post("/cart-delete-item", response_model=CartOut)
def post_cart_delete_product(
    payload: CartItemIn,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return CartService(db).remove_from_cart(user, payload.product_id)
