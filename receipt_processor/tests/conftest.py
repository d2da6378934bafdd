# tests/conftest.py
from datetime import date, time
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from receipt_processor.database import Base, get_db
from receipt_processor.main import app
from receipt_processor import models  # noqa: F401
from receipt_processor.schemas import Item, Receipt


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine):
    SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    def _get_db():
        session = SessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def make_receipt(retailer="", day=30, at=time(9, 0), items=(), total="1.11"):
    return Receipt(
        retailer=retailer,
        purchase_date=date(2024, 7, day),
        purchase_time=at,
        items=[Item(short_description=d, price=Decimal(p)) for d, p in items],
        total=Decimal(total),
    )


@pytest.fixture
def receipt_factory():
    return make_receipt


@pytest.fixture
def target_receipt():
    return make_receipt(
        retailer="Target",
        at=time(13, 1),
        items=[
            ("Coke Zero", "2.99"),
            ("Kit Kat (BIG)", "8.00"),
            (" Napolitan Ice Cream  ", "12.83"),
        ],
        total="23.82",
    )


@pytest.fixture
def target_payload():
    return {
        "retailer": "Target",
        "purchaseDate": "2024-07-30",
        "purchaseTime": "13:01",
        "items": [
            {"shortDescription": "Coke Zero", "price": "2.99"},
            {"shortDescription": "Kit Kat (BIG)", "price": "8.00"},
            {"shortDescription": " Napolitan Ice Cream  ", "price": "12.83"},
        ],
        "total": "23.82",
    }
