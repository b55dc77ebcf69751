# storefront/schemas/product.py
import uuid
from decimal import Decimal

from sqlmodel import SQLModel


class ProductRead(SQLModel):
    """
    Product representation for clients.
    """

    id: uuid.UUID
    sku: str
    name: str
    price: Decimal
    image_url: str
    blurb: str


class CatalogPage(SQLModel):
    """
    View model for the home page.

    success_message is set right after an add-to-cart redirect.
    """

    products: list[ProductRead]
    cart_count: int
    success_message: str | None = None
