# storefront/routers/catalog.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from storefront.core.cart_context import get_cart_id
from storefront.core.config import get_settings
from storefront.database import get_session
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.product import CatalogPage, ProductRead
from storefront.services.cart_service import CartService
from storefront.services.product_service import ProductService

settings = get_settings()

router = APIRouter(tags=["Catalog"])

product_service = ProductService(ProductRepository(), page_size=settings.CATALOG_PAGE_SIZE)
cart_service = CartService(CartRepository(), product_service)


@router.get("/", response_model=CatalogPage)
def home(
    added: str | None = None,
    product: str | None = None,
    session: Session = Depends(get_session),
    cart_id: str = Depends(get_cart_id),
):
    """
    Home page: first catalog page, cart badge count and, right after an
    add-to-cart, a success banner.
    """
    products = product_service.list_catalog(session)
    cart_count = cart_service.get_cart_count(session, cart_id)

    success_message = None
    if added and product:
        success_message = f"{product} added to cart!"

    return CatalogPage(
        products=[ProductRead.model_validate(p) for p in products],
        cart_count=cart_count,
        success_message=success_message,
    )
