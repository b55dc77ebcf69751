# storefront/routers/cart.py
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import RedirectResponse
from sqlmodel import Session

from storefront.core.cart_context import get_cart_id
from storefront.database import get_session
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.cart import (
    CartSummary,
    parse_add_quantity,
    parse_update_quantity,
)
from storefront.services.cart_service import CartService
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/cart", tags=["Cart"])

cart_repo = CartRepository()
product_service = ProductService(ProductRepository())
service = CartService(cart_repo, product_service)


@router.get("", response_model=CartSummary)
def view_cart(
    session: Session = Depends(get_session),
    cart_id: str = Depends(get_cart_id),
):
    """
    Cart page: line items (newest first) and subtotal.
    """
    return service.get_cart(session, cart_id)


@router.post("/add")
def add_to_cart(
    sku: str = Form(...),
    qty: str | None = Form(None),
    session: Session = Depends(get_session),
    cart_id: str = Depends(get_cart_id),
):
    """
    Add a product to the cart and go back to the catalog with a banner.

    - 404 if the sku is unknown.
    """
    name = service.add_item(session, cart_id, sku, parse_add_quantity(qty))
    query = urlencode({"added": "true", "product": name})
    return RedirectResponse(f"/?{query}", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/update")
def update_cart_item(
    sku: str = Form(...),
    qty: str | None = Form(None),
    session: Session = Depends(get_session),
    cart_id: str = Depends(get_cart_id),
):
    """
    Set the quantity of a line; 0 or less removes it.

    - 400 if qty is not an integer.
    """
    service.update_quantity(session, cart_id, sku, parse_update_quantity(qty))
    return RedirectResponse("/cart", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/remove")
def remove_cart_item(
    sku: str = Form(...),
    session: Session = Depends(get_session),
    cart_id: str = Depends(get_cart_id),
):
    service.remove_item(session, cart_id, sku)
    return RedirectResponse("/cart", status_code=status.HTTP_303_SEE_OTHER)
