"""Order aggregate.

An order only associates a customer with the products they ordered; all
per-product decisions happen in the fulfillment strategies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from fulfillment.domain.exceptions import ValidationError

MAX_ORDER_LINES = 50


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.create()`` for new orders. ``product_ids`` may repeat the
    same product, one entry per unit ordered.
    """

    id: int | None
    customer_name: str
    product_ids: list[str]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(customer_name: str, product_ids: list[str]) -> Order:
        """Create a new order, enforcing all invariants."""
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")

        if not product_ids:
            raise ValidationError("Order must contain at least one product")

        if len(product_ids) > MAX_ORDER_LINES:
            raise ValidationError(f"Maximum {MAX_ORDER_LINES} products per order")

        return Order(
            id=None,
            customer_name=customer_name.strip(),
            product_ids=list(product_ids),
        )
