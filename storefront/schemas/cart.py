# storefront/schemas/cart.py
from datetime import datetime
from decimal import Decimal

from sqlmodel import SQLModel

from storefront.core.errors import ValidationFailure


class CartItemRead(SQLModel):
    """
    Read model for a single cart line, including line_total.
    """

    sku: str
    name: str
    price: Decimal
    qty: int
    image_url: str
    line_total: Decimal
    added_at: datetime


class CartSummary(SQLModel):
    """
    Full cart response model with totals.

    subtotal is rounded to cents for display.
    """

    items: list[CartItemRead]
    total_quantity: int
    subtotal: Decimal


# ---- Quantity parsing (form input -> domain quantity) ----


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def parse_add_quantity(raw: str | None) -> int:
    """
    Quantity for add-to-cart.

    Missing, blank, non-integer or non-positive input falls back to 1.
    """
    qty = _parse_int(raw)
    if qty is None or qty < 1:
        return 1
    return qty


def parse_update_quantity(raw: str | None) -> int:
    """
    Quantity for an explicit cart update.

    Values <= 0 are passed through; the service treats them as "remove".

    Raises:
        ValidationFailure: if the value is missing or not an integer.
    """
    qty = _parse_int(raw)
    if qty is None:
        raise ValidationFailure(f"Invalid quantity: {raw!r}")
    return qty
