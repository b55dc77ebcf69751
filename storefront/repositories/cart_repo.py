# storefront/repositories/cart_repo.py
from sqlalchemy import delete, func, update
from sqlmodel import Session, select

from storefront.models.cart import CartItem
from storefront.models.product import Product


class CartRepository:
    """
    Data access layer for cart_items.

    Quantity changes are issued as single UPDATE statements so the store
    applies them atomically; nothing here reads a row, changes it in Python
    and writes it back.
    """

    # Most recently added first
    def list_for_cart(self, session: Session, cart_id: str) -> list[CartItem]:
        stmt = (
            select(CartItem)
            .where(CartItem.cart_id == cart_id)
            .order_by(CartItem.added_at.desc(), CartItem.id.desc())
        )
        return session.exec(stmt).all()

    def total_quantity(self, session: Session, cart_id: str) -> int:
        stmt = select(func.coalesce(func.sum(CartItem.qty), 0)).where(
            CartItem.cart_id == cart_id
        )
        return int(session.exec(stmt).one() or 0)

    def count_lines(self, session: Session) -> int:
        stmt = select(func.count()).select_from(CartItem)
        return int(session.exec(stmt).one() or 0)

    # CRUD
    def create_from_product(
            self,
            session: Session,
            *,
            cart_id: str,
            product: Product,
            qty: int,
    ) -> CartItem:
        """
        Create a CartItem from a Product, snapshotting:
          - name
          - price
          - image_url

        Raises IntegrityError if a line for (cart_id, sku) already exists;
        the caller decides how to recover.
        """
        item = CartItem(
            cart_id=cart_id,
            sku=product.sku,
            name=product.name,
            price=product.price,
            image_url=product.image_url,
            qty=qty,
        )
        session.add(item)
        session.commit()
        session.refresh(item)
        return item

    def increment_qty(self, session: Session, cart_id: str, sku: str, delta: int) -> int:
        """
        Atomically add delta to an existing line's qty.

        Returns the number of rows touched (0 if the line does not exist).
        """
        stmt = (
            update(CartItem)
            .where(CartItem.cart_id == cart_id, CartItem.sku == sku)
            .values(qty=CartItem.qty + delta)
        )
        result = session.exec(stmt)
        session.commit()
        return result.rowcount

    def set_qty(self, session: Session, cart_id: str, sku: str, qty: int) -> int:
        stmt = (
            update(CartItem)
            .where(CartItem.cart_id == cart_id, CartItem.sku == sku)
            .values(qty=qty)
        )
        result = session.exec(stmt)
        session.commit()
        return result.rowcount

    def delete_item(self, session: Session, cart_id: str, sku: str) -> int:
        stmt = delete(CartItem).where(CartItem.cart_id == cart_id, CartItem.sku == sku)
        result = session.exec(stmt)
        session.commit()
        return result.rowcount

    def clear_cart(self, session: Session, cart_id: str) -> None:
        session.exec(delete(CartItem).where(CartItem.cart_id == cart_id))
        session.commit()
