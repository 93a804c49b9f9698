# app/repos/order_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session
from app.data.models.order import OrderModel


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        return order

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.db.get(OrderModel, order_id)

    def list_orders_for_user(self, user_id: int) -> list[OrderModel]:
        stmt = select(OrderModel).where(OrderModel.user_id == user_id).order_by(OrderModel.id)
        return list(self.db.execute(stmt).scalars().all())

    def rollback(self) -> None:
        self.db.rollback()
