# app/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.schemas import OrderOut
from app.services.invoice_service import InvoiceService
from app.services.order_service import OrderService
from app.utils.settings import Settings, get_settings

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=List[OrderOut])
def get_orders(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Orders of the calling user, oldest first.
    """
    return OrderService(db).list_orders(user)


@router.get("/{order_id}/invoice")
def get_invoice(
    order_id: int,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Builds the PDF invoice, stores a copy on disk and streams it back.

    The document is rendered into memory in one pass before the response
    starts, the body is streamed from that buffer in chunks.
    """
    invoice = InvoiceService(db, settings.invoice_dir).render_invoice(order_id, user.id)
    return StreamingResponse(
        invoice.iter_chunks(),
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="{invoice.name}"'},
    )
