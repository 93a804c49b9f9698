import dataclasses
import os

# must run before app modules read the environment
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "1"
os.environ["CELERY_BROKER_URL"] = "memory://"
os.environ["CELERY_RESULT_BACKEND"] = "cache+memory://"
os.environ["CSRF_SECRET"] = "test-secret"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_gateway, get_notifier
from app.data.database import get_db, init_db
from app.data.models import ProductModel, UserModel
from app.main import create_app
from app.utils.settings import get_settings
from tests.fakes import FakeGateway, FakeNotifier


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    yield session
    session.close()


@pytest.fixture()
def make_product(db):
    def _make(title="Widget", price="10.00", description="A widget"):
        product = ProductModel(title=title, price=Decimal(price), description=description)
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make


@pytest.fixture()
def user(db):
    user = UserModel(id=1, email="alice@example.com")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture()
def other_user(db):
    user = UserModel(id=2, email="bob@example.com")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture()
def gateway():
    return FakeGateway()


@pytest.fixture()
def notifier():
    return FakeNotifier()


@pytest.fixture()
def settings(tmp_path):
    return dataclasses.replace(
        get_settings(),
        items_per_page=2,
        invoice_dir=str(tmp_path / "invoices"),
    )


@pytest.fixture()
def client(db, gateway, notifier, settings):
    app = create_app(init_database=False)

    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_gateway] = lambda: gateway
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_settings] = lambda: settings
    return TestClient(app)
