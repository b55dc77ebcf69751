# storefront/schemas/order.py
import uuid
from datetime import datetime
from decimal import Decimal

from sqlmodel import SQLModel


class OrderTotals(SQLModel):
    """
    Amounts computed at checkout, each already rounded to cents.
    """

    subtotal: Decimal
    tax: Decimal
    shipping: Decimal
    total: Decimal


class OrderItemRead(SQLModel):
    """
    Representation of a single order line item.
    """

    sku: str
    name: str
    price: Decimal
    qty: int
    price_at_purchase: Decimal
    image_url: str


class OrderRead(OrderTotals):
    """
    Full order view including items, exactly as stored.
    """

    id: uuid.UUID
    items: list[OrderItemRead]
    created_at: datetime


class OrderPage(OrderRead):
    """
    View model for the order confirmation page, with the header cart count.
    """

    cart_count: int
