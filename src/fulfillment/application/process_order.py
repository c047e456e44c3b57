"""Application service: Process Order use case.

Loads an order and its products, then hands the products to the
fulfillment service. Each product is loaded separately, so an order that
lists the same product twice processes two independent copies of it.
"""

from __future__ import annotations

import structlog

from fulfillment.application.dto import ProcessedLineDTO, ProcessedOrderDTO
from fulfillment.domain.exceptions import EntityNotFoundError
from fulfillment.domain.model.product import Product
from fulfillment.domain.repository.order_repository import OrderRepository
from fulfillment.domain.repository.product_repository import ProductRepository
from fulfillment.domain.service.order_fulfillment_service import (
    OrderFulfillmentService,
)

logger = structlog.get_logger(__name__)


class ProcessOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        fulfillment: OrderFulfillmentService,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._fulfillment = fulfillment

    def handle(self, order_id: int) -> ProcessedOrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        log = logger.bind(order_id=order_id)
        products = [self._load_product(pid) for pid in order.product_ids]
        if not products:
            log.info("order.processed", lines=0)
            return ProcessedOrderDTO(order_id=order_id, lines=[])

        results = self._fulfillment.process_many_sync(products)

        lines = [
            ProcessedLineDTO(
                product_id=product.id,
                product_name=product.name,
                success=result.success,
                available_decremented=result.available_decremented,
            )
            for product, result in zip(products, results)
        ]
        log.info(
            "order.processed",
            lines=len(lines),
            succeeded=sum(1 for line in lines if line.success),
        )
        return ProcessedOrderDTO(order_id=order_id, lines=lines)

    def _load_product(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product
