# app/api/routers/checkout.py
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_gateway, get_notifier
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.schemas import CheckoutOut, OrderOut
from app.services.cart_service import CartService
from app.services.checkout_service import CheckoutService
from app.services.notification_service import NotificationService
from app.services.order_service import OrderService
from app.services.payment_gateway import PaymentGateway
from app.utils.settings import Settings, get_settings

router = APIRouter(tags=["checkout"])


def _checkout(request: Request, user: UserModel, db: Session, gateway: PaymentGateway, settings: Settings):
    svc = CheckoutService(CartService(db), gateway, currency=settings.currency)
    # processor redirects back to the host the user is browsing
    base_url = f"{request.url.scheme}://{request.url.netloc}"
    return svc.prepare_checkout(user, base_url)


def _finalize(user: UserModel, db: Session, notifier: NotificationService):
    return OrderService(db, notification_service=notifier).finalize_order(user)


@router.get("/checkout", response_model=CheckoutOut)
def get_checkout(
    request: Request,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
    gateway: PaymentGateway = Depends(get_gateway),
    settings: Settings = Depends(get_settings),
):
    return _checkout(request, user, db, gateway, settings)


@router.get("/checkout/cancel", response_model=CheckoutOut)
def get_checkout_cancel(
    request: Request,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
    gateway: PaymentGateway = Depends(get_gateway),
    settings: Settings = Depends(get_settings),
):
    """Payment abandoned, open a fresh session for the same cart."""
    return _checkout(request, user, db, gateway, settings)


@router.get("/checkout/success", response_model=OrderOut)
def get_checkout_success(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
    notifier: NotificationService = Depends(get_notifier),
):
    return _finalize(user, db, notifier)


@router.post("/create-order", response_model=OrderOut, status_code=201)
def post_order(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
    notifier: NotificationService = Depends(get_notifier),
):
    return _finalize(user, db, notifier)
