# storefront/services/cart_service.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from storefront.core.errors import StoreFailure
from storefront.repositories.cart_repo import CartRepository
from storefront.schemas.cart import CartItemRead, CartSummary
from storefront.services import pricing
from storefront.services.product_service import ProductService

logger = logging.getLogger(__name__)


class CartService:
    """
    Business logic for cart operations.

    Responsibilities:
      - validate sku against the catalog on add
      - snapshot name/price/image_url from the product on first add
      - keep at most one line per sku, with qty >= 1
      - compute line totals, subtotal and item count

    Every operation takes the cart id explicitly. Errors are not caught
    here; they propagate to the route layer.
    """

    # Tries for an add racing with inserts/deletes of the same line
    ADD_ATTEMPTS = 3

    def __init__(self, cart_repo: CartRepository, products: ProductService):
        self.cart_repo = cart_repo
        self.products = products

    # ---- public operations ----

    def add_item(
        self,
        session: Session,
        cart_id: str,
        sku: str,
        qty: int = 1,
    ) -> str:
        """
        Add qty units of a product to the cart.

        Rules:
          - product must exist (NotFoundError otherwise)
          - qty below 1 is treated as 1
          - an existing line is incremented by qty, never replaced
          - a new line snapshots the product's current name/price/image

        A concurrent request may create or delete the line between the
        increment and the insert; the add is retried a few times and fails
        with StoreFailure rather than being dropped.

        Returns the product name for the confirmation banner.
        """
        product = self.products.get_by_sku(session, sku)
        if qty < 1:
            qty = 1

        for attempt in range(1, self.ADD_ATTEMPTS + 1):
            if self.cart_repo.increment_qty(session, cart_id, sku, qty):
                logger.info("Incremented cart line %s by %s", sku, qty)
                return product.name

            try:
                self.cart_repo.create_from_product(
                    session, cart_id=cart_id, product=product, qty=qty
                )
            except IntegrityError:
                # Another request created the line between our update and insert
                session.rollback()
                logger.warning(
                    "Cart line %s created concurrently (attempt %s), retrying",
                    sku,
                    attempt,
                )
                continue

            logger.info("Added new line to cart %s: %s x%s", cart_id, sku, qty)
            return product.name

        raise StoreFailure("Error adding item to cart")

    def update_quantity(
        self,
        session: Session,
        cart_id: str,
        sku: str,
        qty: int,
    ) -> None:
        """
        Set the quantity of a line.

        qty <= 0 removes the line. A missing line is left missing.
        """
        if qty <= 0:
            self.remove_item(session, cart_id, sku)
            return

        if self.cart_repo.set_qty(session, cart_id, sku, qty):
            logger.info("Updated quantity for %s to %s", sku, qty)
        else:
            logger.info("No cart line for %s; quantity update ignored", sku)

    def remove_item(self, session: Session, cart_id: str, sku: str) -> None:
        """Remove a line from the cart. Removing a missing line is a no-op."""
        if self.cart_repo.delete_item(session, cart_id, sku):
            logger.info("Removed item from cart: %s", sku)

    def get_cart(self, session: Session, cart_id: str) -> CartSummary:
        """
        Return full cart summary:
          - list of CartItemRead (with line_total), newest first
          - total_quantity
          - subtotal (rounded to cents)
        """
        items = self.cart_repo.list_for_cart(session, cart_id)

        item_reads = [
            CartItemRead(
                sku=it.sku,
                name=it.name,
                price=it.price,
                qty=it.qty,
                image_url=it.image_url,
                line_total=pricing.line_total(it.price, it.qty),
                added_at=it.added_at,
            )
            for it in items
        ]

        return CartSummary(
            items=item_reads,
            total_quantity=pricing.cart_quantity(items),
            subtotal=pricing.round_money(pricing.cart_subtotal(items)),
        )

    def get_cart_count(self, session: Session, cart_id: str) -> int:
        return self.cart_repo.total_quantity(session, cart_id)

    def clear_cart(self, session: Session, cart_id: str) -> None:
        self.cart_repo.clear_cart(session, cart_id)
        logger.info("Cart %s cleared", cart_id)
