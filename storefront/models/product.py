# storefront/models/product.py
import uuid
from decimal import Decimal

from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    """
    Catalog entry.

    Read-only from the cart/checkout point of view: the core never writes
    products, it only looks them up by sku and snapshots their fields.
    """

    __tablename__ = "products"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    sku: str = Field(
        unique=True,
        index=True,
        description="Stock keeping unit (unique)",
    )

    name: str = Field(
        description="Display name of the product",
    )

    price: Decimal = Field(
        ge=0,
        max_digits=10,
        decimal_places=2,
        description="Unit price",
    )

    image_url: str = Field(
        description="Image reference shown on the storefront",
    )

    blurb: str = Field(
        description="Short marketing description",
    )
