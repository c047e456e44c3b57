"""Fulfillment strategy contract shared by every product type."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

import structlog

from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.model.result import OrderProcessingResult
from fulfillment.domain.notification.notification_service import (
    NotificationService,
)
from fulfillment.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class StrategyContext:
    """Collaborators a strategy needs for one invocation."""

    product_repo: ProductRepository
    notifications: NotificationService


class ProductStrategy(ABC):
    """Decides what ordering one unit of a product means.

    A strategy reads the product, may mutate and persist it, and calls at
    most one notification, only on the failure or degraded path.
    """

    product_type: ProductType

    @abstractmethod
    def process_order(
        self,
        product: Product,
        context: StrategyContext,
        now: datetime,
    ) -> OrderProcessingResult:
        """Process an order line for *product* as of *now*."""

    # --- Shared steps ---------------------------------------------------------

    def _decrement(
        self, product: Product, context: StrategyContext
    ) -> OrderProcessingResult:
        product.decrement_available()
        context.product_repo.save(product)
        logger.info(
            "product.decremented",
            product_id=product.id,
            product_type=product.type.value,
            available=product.available,
        )
        return OrderProcessingResult.decremented()

    @staticmethod
    def _notify(product: Product, send: Callable[..., None], *args: object) -> None:
        """Best-effort notification: a failing port never aborts processing."""
        try:
            send(*args)
        except Exception:
            logger.exception(
                "notification.failed",
                product_id=product.id,
                notification=getattr(send, "__name__", repr(send)),
            )
