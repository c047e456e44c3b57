"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from fulfillment.domain.service.order_fulfillment_service import (
    OrderFulfillmentService,
)
from fulfillment.infrastructure.config import get_settings
from fulfillment.infrastructure.notifications.logging_notification_service import (
    LoggingNotificationService,
)
from fulfillment.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from fulfillment.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(get_settings().DATA_DIR / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(get_settings().DATA_DIR / "orders.json")


def fulfillment_service(
    product_repo: JsonProductRepository,
) -> OrderFulfillmentService:
    return OrderFulfillmentService(
        product_repo=product_repo,
        notifications=LoggingNotificationService(),
    )
