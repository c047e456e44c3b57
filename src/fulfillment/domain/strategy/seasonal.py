"""Strategy for SEASONAL products.

Business rules:
- Sellable only inside the inclusive season window
  (``season_start <= now <= season_end``) while in stock.
- Before the season starts, the customer is told it is out of stock.
- Otherwise, if a restock (now + lead time) would land after the season
  ends, the product is out of stock for the rest of the season: notify
  and force its stock to zero.
- If the restock lands in time (or the season has no end), notify the
  lead-time delay and accept the order.
"""

from __future__ import annotations

from datetime import datetime

import structlog

from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.model.result import OrderProcessingResult
from fulfillment.domain.strategy.base import ProductStrategy, StrategyContext

logger = structlog.get_logger(__name__)


class SeasonalProductStrategy(ProductStrategy):

    product_type = ProductType.SEASONAL

    def process_order(
        self,
        product: Product,
        context: StrategyContext,
        now: datetime,
    ) -> OrderProcessingResult:
        if product.available > 0 and product.is_in_season(now):
            return self._decrement(product, context)

        return self._handle_out_of_stock_or_season(product, context, now)

    def _handle_out_of_stock_or_season(
        self,
        product: Product,
        context: StrategyContext,
        now: datetime,
    ) -> OrderProcessingResult:
        notifications = context.notifications

        if product.season_start is not None and now < product.season_start:
            logger.info("product.season_not_started", product_id=product.id)
            self._notify(product, notifications.notify_out_of_stock, product.name)
            return OrderProcessingResult.rejected()

        restock = product.restock_date(now)

        if product.season_end is not None and restock > product.season_end:
            logger.info(
                "product.restock_after_season",
                product_id=product.id,
                restock_date=restock.isoformat(),
                season_end=product.season_end.isoformat(),
            )
            self._notify(product, notifications.notify_out_of_stock, product.name)
            product.mark_unavailable()
            context.product_repo.save(product)
            return OrderProcessingResult.rejected_and_updated()

        self._notify(
            product,
            notifications.notify_delay,
            product.lead_time,
            product.name,
        )
        context.product_repo.save(product)
        return OrderProcessingResult.delayed()
