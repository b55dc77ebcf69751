from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import storefront.database as database
from storefront.main import app
from storefront.models.product import Product
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.order_repo import OrderRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.services.cart_service import CartService
from storefront.services.checkout_service import CheckoutService
from storefront.services.product_service import ProductService

CATALOG = [
    ("SKU1001", "Aurora Ceramic Mug", "14.99", "/images/mug.jfif", "Stoneware, 350ml capacity"),
    ("SKU1002", "Nebula Cotton Tee", "24.00", "/images/tee.jfif", "100% premium cotton"),
    ("SKU1003", "Cosmic Hardcover Notebook", "12.50", "/images/notebook.jfif", "120 pages, dotted grid"),
    ("SKU1004", "Stellar Gel Pen", "8.99", "/images/pen.jfif", "Metal body, smooth writing"),
    ("SKU1005", "Galaxy Travel Backpack", "45.00", "/images/backpack.jfif", "Water resistant"),
    ("SKU1006", "Orbit Water Bottle", "18.00", "/images/bottle.jfif", "Insulated, 750ml"),
    ("SKU1007", "Comet Sticker Pack", "4.50", "/images/stickers.jfif", "12 vinyl stickers"),
    ("SKU1008", "Eclipse Desk Lamp", "39.99", "/images/lamp.jfif", "Dimmable LED"),
    ("SKU1009", "Meteor Tote Bag", "16.00", "/images/tote.jfif", "Canvas, reinforced straps"),
    ("SKU2001", "Ten Dollar Item", "10.00", "/images/ten.jfif", "Costs ten"),
    ("SKU2002", "Five Dollar Item", "5.00", "/images/five.jfif", "Costs five"),
]


@pytest.fixture()
def engine(monkeypatch):
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(test_engine)
    monkeypatch.setattr(database, "engine", test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture()
def seeded(engine):
    with Session(engine) as s:
        for sku, name, price, image_url, blurb in CATALOG:
            s.add(
                Product(
                    sku=sku,
                    name=name,
                    price=Decimal(price),
                    image_url=image_url,
                    blurb=blurb,
                )
            )
        s.commit()
    return engine


@pytest.fixture()
def session(seeded):
    with Session(seeded) as s:
        yield s


@pytest.fixture()
def product_service():
    return ProductService(ProductRepository())


@pytest.fixture()
def cart_service(product_service):
    return CartService(CartRepository(), product_service)


@pytest.fixture()
def checkout_service():
    return CheckoutService(
        OrderRepository(),
        CartRepository(),
        tax_rate=Decimal("0.13"),
        shipping=Decimal("20.00"),
    )


@pytest.fixture()
def client(seeded):
    with TestClient(app) as c:
        yield c
