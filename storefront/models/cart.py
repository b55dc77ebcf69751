# storefront/models/cart.py
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import CheckConstraint, UniqueConstraint
from sqlmodel import SQLModel, Field


class CartItem(SQLModel, table=True):
    """
    Shopping cart line item.

    One cart cannot have 2 rows for the same sku. name/price/image_url are
    snapshotted from the product when the line is first created and are not
    re-synced afterwards.
    """

    __tablename__ = "cart_items"
    __table_args__ = (
        UniqueConstraint("cart_id", "sku"),
        CheckConstraint("qty > 0", name="ck_cart_items_qty_positive"),
    )

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    cart_id: str = Field(
        index=True,
        description="Cart this line belongs to",
    )

    sku: str = Field(
        index=True,
        description="Product sku",
    )

    name: str
    price: Decimal = Field(
        max_digits=10,
        decimal_places=2,
        description="Price when added to cart",
    )
    image_url: str

    qty: int = Field(
        gt=0,
        description="Must be >= 1",
    )

    added_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Set on first insertion only",
    )
