"""Application service: Create Order use case.

Resolves product names against the catalog and records which products
the customer ordered. Nothing is decided about stock at this point; that
happens when the order is processed.
"""

from __future__ import annotations

from fulfillment.application.dto import OrderDTO
from fulfillment.domain.exceptions import EntityNotFoundError
from fulfillment.domain.model.order import Order
from fulfillment.domain.repository.order_repository import OrderRepository
from fulfillment.domain.repository.product_repository import ProductRepository


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, customer_name: str, product_names: list[str]) -> OrderDTO:
        product_ids: list[str] = []
        resolved_names: list[str] = []

        for name in product_names:
            product = self._product_repo.get_by_name(name)
            if product is None:
                raise EntityNotFoundError(f"Product not found: '{name}'")
            product_ids.append(product.id)
            resolved_names.append(product.name)

        order = Order.create(customer_name=customer_name, product_ids=product_ids)
        self._order_repo.save(order)

        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            customer_name=order.customer_name,
            product_names=resolved_names,
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
