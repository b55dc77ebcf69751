# storefront/services/pricing.py
"""
Money arithmetic shared by the cart and checkout services.

All amounts are Decimal. Sums are kept at full precision; rounding to cents
(half-up) happens only where a value is displayed or stored.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Protocol

from storefront.schemas.order import OrderTotals

CENT = Decimal("0.01")


class PricedLine(Protocol):
    price: Decimal
    qty: int


def round_money(value: Decimal) -> Decimal:
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def line_total(price: Decimal, qty: int) -> Decimal:
    return Decimal(price) * qty


def cart_subtotal(lines: Iterable[PricedLine]) -> Decimal:
    """Sum of price * qty over all lines, unrounded."""
    return sum((line_total(line.price, line.qty) for line in lines), Decimal("0"))


def cart_quantity(lines: Iterable[PricedLine]) -> int:
    return sum(line.qty for line in lines)


def compute_order_totals(
    subtotal: Decimal,
    tax_rate: Decimal,
    shipping: Decimal,
) -> OrderTotals:
    """
    Compute the stored order amounts.

      tax   = round(subtotal * tax_rate, 2)
      total = round(subtotal + tax + shipping, 2)

    Both use the unrounded subtotal; total adds the already rounded tax,
    so total == subtotal + tax + shipping holds on the stored values.
    """
    tax = round_money(subtotal * Decimal(tax_rate))
    total = round_money(subtotal + tax + Decimal(shipping))

    return OrderTotals(
        subtotal=round_money(subtotal),
        tax=tax,
        shipping=round_money(shipping),
        total=total,
    )
