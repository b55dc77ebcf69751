# storefront/routers/orders.py
import uuid

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from sqlmodel import Session

from storefront.core.cart_context import get_cart_id
from storefront.core.config import get_settings
from storefront.database import get_session
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.order_repo import OrderRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.order import OrderPage
from storefront.services.cart_service import CartService
from storefront.services.checkout_service import CheckoutService
from storefront.services.product_service import ProductService

settings = get_settings()

router = APIRouter(tags=["Orders"])

service = CheckoutService(
    OrderRepository(),
    CartRepository(),
    tax_rate=settings.TAX_RATE,
    shipping=settings.SHIPPING_FLAT,
)
cart_service = CartService(CartRepository(), ProductService(ProductRepository()))


@router.post("/checkout")
def checkout(
    session: Session = Depends(get_session),
    cart_id: str = Depends(get_cart_id),
):
    """
    Turn the cart into an order.

    Redirects to the cart when it is empty, otherwise to the order page.
    """
    order_id = service.checkout(session, cart_id)
    if order_id is None:
        return RedirectResponse("/cart", status_code=status.HTTP_303_SEE_OTHER)
    return RedirectResponse(f"/order/{order_id}", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/order/{order_id}", response_model=OrderPage)
def get_order(
    order_id: uuid.UUID,
    session: Session = Depends(get_session),
    cart_id: str = Depends(get_cart_id),
):
    """
    Order confirmation page, with the current cart count for the header.

    - 404 if the order does not exist.
    """
    order = service.get_order(session, order_id)
    return OrderPage(
        **order.model_dump(),
        cart_count=cart_service.get_cart_count(session, cart_id),
    )
