import uuid
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from storefront.core.errors import NotFoundError, StoreFailure
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.order_repo import OrderRepository
from storefront.services.checkout_service import CheckoutService

CART_ID = "test-cart"


def test_checkout_worked_example(session, cart_service, checkout_service):
    cart_service.add_item(session, CART_ID, "SKU2001", 2)  # 10.00 x 2
    cart_service.add_item(session, CART_ID, "SKU2002", 1)  # 5.00 x 1

    order_id = checkout_service.checkout(session, CART_ID)

    assert order_id is not None
    order = checkout_service.get_order(session, order_id)
    assert order.subtotal == Decimal("25.00")
    assert order.tax == Decimal("3.25")
    assert order.shipping == Decimal("20.00")
    assert order.total == Decimal("48.25")
    assert len(order.items) == 2
    assert cart_service.get_cart(session, CART_ID).items == []


def test_order_items_copy_cart_lines(session, cart_service, checkout_service):
    cart_service.add_item(session, CART_ID, "SKU1001", 2)
    cart_service.add_item(session, CART_ID, "SKU1005", 1)
    cart_lines = cart_service.get_cart(session, CART_ID).items

    order = checkout_service.get_order(session, checkout_service.checkout(session, CART_ID))

    assert [it.sku for it in order.items] == [it.sku for it in cart_lines]
    for item, line in zip(order.items, cart_lines):
        assert item.name == line.name
        assert item.qty == line.qty
        assert item.price == line.price
        assert item.price_at_purchase == line.price
        assert item.image_url == line.image_url


def test_checkout_empty_cart_creates_nothing(session, cart_service, checkout_service):
    assert checkout_service.checkout(session, CART_ID) is None

    assert checkout_service.count_orders(session) == 0
    assert cart_service.get_cart(session, CART_ID).items == []


def test_checkout_only_clears_its_own_cart(session, cart_service, checkout_service):
    cart_service.add_item(session, CART_ID, "SKU1001", 1)
    cart_service.add_item(session, "other-cart", "SKU1002", 4)

    checkout_service.checkout(session, CART_ID)

    assert cart_service.get_cart_count(session, CART_ID) == 0
    assert cart_service.get_cart_count(session, "other-cart") == 4


def test_stored_totals_are_not_recomputed(session, cart_service):
    service = CheckoutService(
        OrderRepository(),
        CartRepository(),
        tax_rate=Decimal("0.13"),
        shipping=Decimal("20.00"),
    )
    cart_service.add_item(session, CART_ID, "SKU1001", 1)
    order_id = service.checkout(session, CART_ID)

    # Later configuration changes must not leak into existing orders
    service.tax_rate = Decimal("0.50")
    service.shipping = Decimal("0")
    order = service.get_order(session, order_id)

    assert order.subtotal == Decimal("14.99")
    assert order.tax == Decimal("1.95")
    assert order.shipping == Decimal("20.00")
    assert order.total == Decimal("36.94")


def test_configured_rate_and_shipping(session, cart_service):
    service = CheckoutService(
        OrderRepository(),
        CartRepository(),
        tax_rate=Decimal("0.05"),
        shipping=Decimal("7.50"),
    )
    cart_service.add_item(session, CART_ID, "SKU2001", 10)

    order = service.get_order(session, service.checkout(session, CART_ID))

    assert order.tax == Decimal("5.00")
    assert order.shipping == Decimal("7.50")
    assert order.total == Decimal("112.50")


def test_failed_checkout_keeps_cart_and_creates_no_order(
    session, cart_service, checkout_service, monkeypatch
):
    cart_service.add_item(session, CART_ID, "SKU1001", 2)

    def fail(*args, **kwargs):
        raise OperationalError("INSERT INTO order_items", {}, Exception("disk full"))

    monkeypatch.setattr(checkout_service.order_repo, "create_items", fail)

    with pytest.raises(StoreFailure):
        checkout_service.checkout(session, CART_ID)

    assert checkout_service.count_orders(session) == 0
    assert cart_service.get_cart_count(session, CART_ID) == 2


def test_get_unknown_order_raises_not_found(session, checkout_service):
    with pytest.raises(NotFoundError):
        checkout_service.get_order(session, uuid.uuid4())
