"""NotificationService that records each notification as a log event.

Delivery to customers (email, SMS, ...) is not handled here; downstream
consumers can pick the events up from the log stream.
"""

from __future__ import annotations

from datetime import datetime

import structlog

from fulfillment.domain.notification.notification_service import (
    NotificationService,
)

logger = structlog.get_logger(__name__)


class LoggingNotificationService(NotificationService):

    def notify_out_of_stock(self, product_name: str) -> None:
        logger.info("notification.out_of_stock", product_name=product_name)

    def notify_delay(self, lead_time_days: int, product_name: str) -> None:
        logger.info(
            "notification.delay",
            product_name=product_name,
            lead_time_days=lead_time_days,
        )

    def notify_expiration(self, product_name: str, expiry_date: datetime) -> None:
        logger.info(
            "notification.expiration",
            product_name=product_name,
            expiry_date=expiry_date.isoformat(),
        )
