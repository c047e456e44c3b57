"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderDTO:
    """Output: a created order as displayed to the user."""

    id: int
    customer_name: str
    product_names: list[str]
    created_at: str


@dataclass(frozen=True)
class ProcessedLineDTO:
    """Output: what happened to one product of a processed order."""

    product_id: str
    product_name: str
    success: bool
    available_decremented: bool


@dataclass(frozen=True)
class ProcessedOrderDTO:
    """Output: the outcome of processing a whole order."""

    order_id: int
    lines: list[ProcessedLineDTO]

    @property
    def all_succeeded(self) -> bool:
        return all(line.success for line in self.lines)
