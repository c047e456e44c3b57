"""Application service: Add Product use case."""

from __future__ import annotations

from datetime import datetime

from fulfillment.domain.exceptions import ValidationError
from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        product_type: str | ProductType,
        available: int,
        lead_time: int,
        expiry_date: datetime | None = None,
        season_start: datetime | None = None,
        season_end: datetime | None = None,
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name)
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        # Auto-assign the next numeric ID; non-numeric IDs are left alone
        numeric_ids = [
            int(p.id) for p in self._product_repo.list_all() if p.id.isdigit()
        ]
        next_id = str(max(numeric_ids, default=0) + 1)

        product = Product.create(
            id=next_id,
            type=ProductType.parse(product_type),
            name=name,
            available=available,
            lead_time=lead_time,
            expiry_date=expiry_date,
            season_start=season_start,
            season_end=season_end,
        )
        self._product_repo.save(product)
        return product
