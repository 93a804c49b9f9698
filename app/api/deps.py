# app/api/deps.py
from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.data.models.user import UserModel
from app.services.notification_service import NotificationService
from app.services.payment_gateway import PaymentGateway, StripeGateway
from app.services.user_service import UserService
from app.utils.settings import Settings, get_settings


def get_current_user(
    user_id: int = Query(..., gt=0),
    db: Session = Depends(get_db),
) -> UserModel:
    return UserService(db).load_user(user_id)


def get_gateway(settings: Settings = Depends(get_settings)) -> PaymentGateway:
    return StripeGateway.from_settings(settings)


def get_notifier() -> NotificationService:
    return NotificationService()
