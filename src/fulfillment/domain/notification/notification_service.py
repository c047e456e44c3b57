"""Notification port consumed by the fulfillment strategies.

Only the *decision* to notify belongs to the domain. How a notification
reaches the customer is up to the implementation wired in at the
composition root.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class NotificationService(ABC):

    @abstractmethod
    def notify_out_of_stock(self, product_name: str) -> None:
        """Tell the customer the product cannot be supplied."""

    @abstractmethod
    def notify_delay(self, lead_time_days: int, product_name: str) -> None:
        """Tell the customer the product ships after its restock lead time."""

    @abstractmethod
    def notify_expiration(self, product_name: str, expiry_date: datetime) -> None:
        """Tell the customer the product has expired."""
