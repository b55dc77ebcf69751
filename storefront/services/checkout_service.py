# storefront/services/checkout_service.py
import logging
import uuid
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from storefront.core.errors import NotFoundError, StoreFailure
from storefront.models.order import Order, OrderItem
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.order_repo import OrderRepository
from storefront.schemas.order import OrderItemRead, OrderRead
from storefront.services import pricing

logger = logging.getLogger(__name__)


class CheckoutService:
    """
    Business logic for checkout and order lookup.

    Responsibilities:
      - Create an order from the cart
      - Compute subtotal, tax, shipping and total
      - Clear the cart lines the order was built from
      - Serve stored orders without recomputing amounts
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        cart_repo: CartRepository,
        tax_rate: Decimal,
        shipping: Decimal,
    ):
        self.order_repo = order_repo
        self.cart_repo = cart_repo
        self.tax_rate = tax_rate
        self.shipping = shipping

    def checkout(self, session: Session, cart_id: str) -> uuid.UUID | None:
        """
        Convert the cart into an Order.

        Steps:
          1. Load cart lines; return None if there are none.
          2. Compute subtotal, tax, shipping, total.
          3. Create Order + OrderItem rows (price_at_purchase = price).
          4. Delete the cart lines.
          5. Commit 3 and 4 as one transaction.

        Raises:
            StoreFailure: if the transaction fails. Nothing is applied.
        """
        # 1) Load cart
        cart_items = self.cart_repo.list_for_cart(session, cart_id)
        if not cart_items:
            logger.info("Checkout requested for empty cart %s", cart_id)
            return None

        logger.info("Processing checkout with %s items", len(cart_items))

        # 2) Totals
        totals = pricing.compute_order_totals(
            pricing.cart_subtotal(cart_items),
            self.tax_rate,
            self.shipping,
        )

        try:
            # 3) Order + items
            order = self.order_repo.create_order(
                session,
                Order(
                    subtotal=totals.subtotal,
                    tax=totals.tax,
                    shipping=totals.shipping,
                    total=totals.total,
                ),
            )
            self.order_repo.create_items(
                session,
                [
                    OrderItem(
                        order_id=order.id,
                        sku=ci.sku,
                        name=ci.name,
                        price=ci.price,
                        qty=ci.qty,
                        price_at_purchase=ci.price,
                        image_url=ci.image_url,
                    )
                    for ci in cart_items
                ],
            )

            # 4) Clear cart
            for ci in cart_items:
                session.delete(ci)

            # 5) Commit transaction
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error("Checkout failed for cart %s: %s", cart_id, exc)
            raise StoreFailure("Error processing checkout") from exc

        logger.info("Order created: %s (total %s)", order.id, totals.total)
        return order.id

    def get_order(self, session: Session, order_id: uuid.UUID) -> OrderRead:
        """
        Get a single order with its items, as stored at checkout.

        - NotFoundError if the order does not exist.
        """
        order = self.order_repo.get_by_id(session, order_id)
        if not order:
            raise NotFoundError("Order not found")

        items = self.order_repo.list_items_for_order(session, order.id)
        return OrderRead(
            id=order.id,
            subtotal=order.subtotal,
            tax=order.tax,
            shipping=order.shipping,
            total=order.total,
            created_at=order.created_at,
            items=[
                OrderItemRead(
                    sku=it.sku,
                    name=it.name,
                    price=it.price,
                    qty=it.qty,
                    price_at_purchase=it.price_at_purchase,
                    image_url=it.image_url,
                )
                for it in items
            ],
        )

    def count_orders(self, session: Session) -> int:
        return self.order_repo.count(session)
