# storefront/repositories/product_repo.py
from sqlalchemy import func
from sqlmodel import Session, select

from storefront.models.product import Product


class ProductRepository:
    """
    Data access layer for the catalog.

    - Read-only queries; the storefront never writes products.
    - No FastAPI, no business logic.
    """

    def find_by_sku(self, session: Session, sku: str) -> Product | None:
        stmt = select(Product).where(Product.sku == sku)
        return session.exec(stmt).first()

    def list(self, session: Session, limit: int = 50) -> list[Product]:
        # Ordered by sku so the catalog page is stable across requests
        stmt = select(Product).order_by(Product.sku).limit(limit)
        return session.exec(stmt).all()

    def count(self, session: Session) -> int:
        stmt = select(func.count()).select_from(Product)
        return int(session.exec(stmt).one() or 0)
