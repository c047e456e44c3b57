"""Strategy for EXPIRABLE products.

Business rules:
- Sellable while in stock and strictly before the expiry date.
- Once expired, or when out of stock, notify the expiration and force the
  stock to zero.
"""

from __future__ import annotations

from datetime import datetime

import structlog

from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.model.result import OrderProcessingResult
from fulfillment.domain.strategy.base import ProductStrategy, StrategyContext

logger = structlog.get_logger(__name__)


class ExpirableProductStrategy(ProductStrategy):

    product_type = ProductType.EXPIRABLE

    def process_order(
        self,
        product: Product,
        context: StrategyContext,
        now: datetime,
    ) -> OrderProcessingResult:
        if (
            product.available > 0
            and product.expiry_date is not None
            and not product.is_expired(now)
        ):
            return self._decrement(product, context)

        return self._handle_expired_or_out_of_stock(product, context)

    def _handle_expired_or_out_of_stock(
        self,
        product: Product,
        context: StrategyContext,
    ) -> OrderProcessingResult:
        if product.expiry_date is None:
            logger.warning("product.missing_expiry_date", product_id=product.id)
            return OrderProcessingResult.rejected()

        self._notify(
            product,
            context.notifications.notify_expiration,
            product.name,
            product.expiry_date,
        )
        product.mark_unavailable()
        context.product_repo.save(product)
        return OrderProcessingResult.rejected_and_updated()
