# storefront/core/cart_context.py
from storefront.core.config import get_settings

settings = get_settings()


def get_cart_id() -> str:
    """
    Resolve the cart a request operates on.

    The storefront has a single shared cart: every request gets
    DEFAULT_CART_ID. Services take the id as a parameter, so scoping carts
    per session only requires changing this dependency.
    """
    return settings.DEFAULT_CART_ID
