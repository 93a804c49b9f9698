# app/data/seed.py
from decimal import Decimal

from app.data.database import SessionLocal, init_db
from app.data.models import ProductModel, UserModel

PRODUCTS = [
    {"title": "Keyboard", "price": Decimal("199.99"), "description": "Mechanical keyboard"},
    {"title": "Mouse", "price": Decimal("49.50"), "description": "Wireless mouse"},
    {"title": "Monitor", "price": Decimal("899.00"), "description": "27 inch monitor"},
]


def seed():
    init_db()
    db = SessionLocal()
    try:
        # only seed an empty store
        if db.query(ProductModel).first():
            return
        db.add_all(ProductModel(**p) for p in PRODUCTS)
        db.add(UserModel(id=1, email="test@test.com"))
        db.commit()
    finally:
        db.close()


if __name__ == "__main__":
    seed()
