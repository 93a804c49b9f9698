# app/api/routers/products.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.schemas import ProductOut, ProductPageOut
from app.services.catalog_service import CatalogService
from app.utils.settings import Settings, get_settings

router = APIRouter(tags=["products"])


def get_service(db: Session, settings: Settings):
    return CatalogService(db, page_size=settings.items_per_page)


@router.get("/", response_model=ProductPageOut)
def get_index(
    page: str | None = Query(None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    return get_service(db, settings).list_products(page)


@router.get("/products", response_model=ProductPageOut)
def get_products(
    page: str | None = Query(None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    return get_service(db, settings).list_products(page)


@router.get("/products/{product_id}", response_model=ProductOut)
def get_product(
    product_id: int,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    return get_service(db, settings).get_product(product_id)
