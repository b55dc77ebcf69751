# storefront/services/product_service.py
from sqlmodel import Session

from storefront.core.errors import NotFoundError
from storefront.models.product import Product
from storefront.repositories.product_repo import ProductRepository


class ProductService:
    """
    Catalog lookups for the storefront.

    Responsibilities:
      - sku lookup with NotFound semantics
      - the home page product listing
    """

    def __init__(self, repo: ProductRepository, page_size: int = 9):
        self.repo = repo
        self.page_size = page_size

    def find_by_sku(self, session: Session, sku: str) -> Product | None:
        return self.repo.find_by_sku(session, sku)

    def get_by_sku(self, session: Session, sku: str) -> Product:
        product = self.repo.find_by_sku(session, sku)
        if not product:
            raise NotFoundError("Product not found")
        return product

    def list_products(self, session: Session, limit: int = 50) -> list[Product]:
        return self.repo.list(session, limit=limit)

    def list_catalog(self, session: Session) -> list[Product]:
        """First page of the catalog, as shown on the home page."""
        return self.repo.list(session, limit=self.page_size)

    def count(self, session: Session) -> int:
        return self.repo.count(session)
