"""Product aggregate.

Products live in the catalog independently of orders. Order processing
reads a product, decides what the order means for it, and may mutate its
stock level (decrement by one, or force to zero).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

from fulfillment.domain.exceptions import (
    UnsupportedProductTypeError,
    ValidationError,
)


def as_utc(value: datetime | None) -> datetime | None:
    """Treat a timezone-naive datetime as UTC; aware values pass through."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class ProductType(Enum):
    STANDARD = "STANDARD"
    SEASONAL = "SEASONAL"
    EXPIRABLE = "EXPIRABLE"

    @staticmethod
    def parse(raw: str | ProductType) -> ProductType:
        """Map a raw type tag to a ProductType.

        Tags are case-insensitive. ``NORMAL`` is accepted as a legacy alias
        for STANDARD.
        """
        if isinstance(raw, ProductType):
            return raw
        tag = str(raw).strip().upper()
        if tag == "NORMAL":
            return ProductType.STANDARD
        try:
            return ProductType(tag)
        except ValueError as exc:
            raise UnsupportedProductTypeError(raw) from exc


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root. The ``__init__`` is intentionally simple so
    repositories can reconstitute stored records as-is; use
    ``Product.create()`` for new catalog entries.

    Invariants:
    - ``available`` is never negative
    - ``lead_time`` is a number of days, never negative
    """

    id: str
    type: ProductType
    name: str
    available: int
    lead_time: int
    expiry_date: datetime | None = None
    season_start: datetime | None = None
    season_end: datetime | None = None

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        id: str,
        type: ProductType,
        name: str,
        available: int,
        lead_time: int,
        expiry_date: datetime | None = None,
        season_start: datetime | None = None,
        season_end: datetime | None = None,
    ) -> Product:
        """Create a new catalog product, enforcing all invariants.

        Naive dates are taken as UTC.
        """
        expiry_date = as_utc(expiry_date)
        season_start = as_utc(season_start)
        season_end = as_utc(season_end)

        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if available < 0:
            raise ValidationError(
                f"Available quantity cannot be negative, got {available}"
            )
        if lead_time < 0:
            raise ValidationError(f"Lead time cannot be negative, got {lead_time}")

        if type == ProductType.EXPIRABLE and expiry_date is None:
            raise ValidationError("Expirable products require an expiry date")

        if type == ProductType.SEASONAL:
            if season_start is None or season_end is None:
                raise ValidationError(
                    "Seasonal products require both season start and season end"
                )
            if season_start > season_end:
                raise ValidationError("Season start must not be after season end")

        return Product(
            id=id,
            type=type,
            name=name.strip(),
            available=available,
            lead_time=lead_time,
            expiry_date=expiry_date,
            season_start=season_start,
            season_end=season_end,
        )

    # --- Stock mutations ------------------------------------------------------

    def decrement_available(self) -> None:
        """Consume exactly one unit of stock."""
        if self.available <= 0:
            raise ValidationError(f"No stock left to decrement for {self.name}")
        self.available -= 1

    def mark_unavailable(self) -> None:
        """Force the stock level to zero (expired / out of season)."""
        self.available = 0

    # --- Date helpers ---------------------------------------------------------

    def restock_date(self, now: datetime) -> datetime:
        return now + timedelta(days=self.lead_time)

    def is_in_season(self, now: datetime) -> bool:
        """True if *now* falls inside the inclusive season window."""
        if self.season_start is None or self.season_end is None:
            return False
        return self.season_start <= now <= self.season_end

    def is_expired(self, now: datetime) -> bool:
        """True once *now* has reached the expiry date.

        Exactly-at-expiry counts as expired. A product without an expiry
        date is never reported as expired.
        """
        if self.expiry_date is None:
            return False
        return self.expiry_date <= now
