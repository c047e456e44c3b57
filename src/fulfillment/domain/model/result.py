"""Outcome of processing one order line against one product."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderProcessingResult:
    """Value object returned by every fulfillment strategy.

    ``success`` means the line can be fulfilled, possibly with a delay.
    ``product_updated`` means the stored product record was written.
    ``available_decremented`` means exactly one unit of stock was consumed.
    """

    success: bool
    product_updated: bool
    available_decremented: bool

    @staticmethod
    def decremented() -> OrderProcessingResult:
        return OrderProcessingResult(
            success=True, product_updated=True, available_decremented=True
        )

    @staticmethod
    def delayed() -> OrderProcessingResult:
        return OrderProcessingResult(
            success=True, product_updated=True, available_decremented=False
        )

    @staticmethod
    def rejected() -> OrderProcessingResult:
        return OrderProcessingResult(
            success=False, product_updated=False, available_decremented=False
        )

    @staticmethod
    def rejected_and_updated() -> OrderProcessingResult:
        return OrderProcessingResult(
            success=False, product_updated=True, available_decremented=False
        )
