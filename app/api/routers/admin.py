# app/api/routers/admin.py
from fastapi import APIRouter, Depends, Header
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.schemas import AdminProductsOut, MessageOut
from app.services.admin_service import AdminService
from app.utils.settings import Settings, get_settings

router = APIRouter(prefix="/admin", tags=["admin"])


def get_service(db: Session, settings: Settings):
    return AdminService(db, csrf_secret=settings.csrf_secret)


@router.get("/products", response_model=AdminProductsOut)
def get_admin_products(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    svc = get_service(db, settings)
    return {"products": svc.list_products(), "csrf_token": svc.csrf_token(user.id)}


@router.delete("/product/{product_id}", response_model=MessageOut)
def delete_product(
    product_id: int,
    user: UserModel = Depends(get_current_user),
    csrf_token: str | None = Header(None, alias="csrf-token"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    get_service(db, settings).delete_product(user.id, product_id, csrf_token)
    return {"message": "Success!"}
