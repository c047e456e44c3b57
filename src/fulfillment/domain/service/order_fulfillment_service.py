"""Domain service: Order Fulfillment.

Selects the fulfillment strategy for each product by its type and
aggregates the per-product results of an order.

Each product is processed as an independent read-decide-write sequence.
Persistence is last-write-wins per product with no lock held across that
sequence, so two runs touching the same product at the same time can both
see the same stock level and over-sell it.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timezone

import structlog

from fulfillment.domain.exceptions import UnsupportedProductTypeError
from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.model.result import OrderProcessingResult
from fulfillment.domain.notification.notification_service import (
    NotificationService,
)
from fulfillment.domain.repository.product_repository import ProductRepository
from fulfillment.domain.strategy.base import ProductStrategy, StrategyContext
from fulfillment.domain.strategy.expirable import ExpirableProductStrategy
from fulfillment.domain.strategy.seasonal import SeasonalProductStrategy
from fulfillment.domain.strategy.standard import StandardProductStrategy

logger = structlog.get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def default_strategies() -> dict[ProductType, ProductStrategy]:
    """One built-in strategy per product type."""
    strategies: list[ProductStrategy] = [
        StandardProductStrategy(),
        SeasonalProductStrategy(),
        ExpirableProductStrategy(),
    ]
    return {s.product_type: s for s in strategies}


class OrderFulfillmentService:

    def __init__(
        self,
        product_repo: ProductRepository,
        notifications: NotificationService,
        strategies: Mapping[ProductType, ProductStrategy] | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._context = StrategyContext(
            product_repo=product_repo,
            notifications=notifications,
        )
        self._strategies: dict[ProductType, ProductStrategy] = dict(
            default_strategies() if strategies is None else strategies
        )
        self._clock = clock

    def register(self, product_type: ProductType, strategy: ProductStrategy) -> None:
        """Add or replace the strategy used for *product_type*."""
        self._strategies[product_type] = strategy

    def process_one(self, product: Product) -> OrderProcessingResult:
        """Process one order line for *product*.

        Raises UnsupportedProductTypeError if no strategy is registered
        for the product's type.
        """
        strategy = self._strategies.get(product.type)
        if strategy is None:
            raise UnsupportedProductTypeError(product.type)

        # Read the clock once so every comparison in the strategy agrees.
        now = self._clock()
        result = strategy.process_order(product, self._context, now)

        logger.debug(
            "product.processed",
            product_id=product.id,
            product_type=product.type.value,
            success=result.success,
            product_updated=result.product_updated,
            available_decremented=result.available_decremented,
        )
        return result

    async def process_many(
        self, products: Iterable[Product]
    ) -> list[OrderProcessingResult]:
        """Process every product concurrently.

        Results come back in input order. The first failure propagates and
        fails the whole batch; writes and notifications already made by the
        other products are not rolled back.
        """
        return list(
            await asyncio.gather(
                *(asyncio.to_thread(self.process_one, p) for p in products)
            )
        )

    def process_many_sync(
        self, products: Iterable[Product]
    ) -> list[OrderProcessingResult]:
        """Blocking wrapper around ``process_many`` for synchronous callers."""
        return asyncio.run(self.process_many(products))
