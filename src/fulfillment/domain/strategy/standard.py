"""Strategy for STANDARD products.

Business rules:
- If the product is in stock, consume one unit.
- If it is out of stock but can be restocked, notify the lead-time delay.
- With no stock and no lead time the order line cannot be served.
"""

from __future__ import annotations

from datetime import datetime

from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.model.result import OrderProcessingResult
from fulfillment.domain.strategy.base import ProductStrategy, StrategyContext


class StandardProductStrategy(ProductStrategy):

    product_type = ProductType.STANDARD

    def process_order(
        self,
        product: Product,
        context: StrategyContext,
        now: datetime,
    ) -> OrderProcessingResult:
        if product.available > 0:
            return self._decrement(product, context)

        if product.lead_time > 0:
            self._notify(
                product,
                context.notifications.notify_delay,
                product.lead_time,
                product.name,
            )
            # Nothing changes, but the record is still written back.
            context.product_repo.save(product)
            return OrderProcessingResult.delayed()

        return OrderProcessingResult.rejected()
