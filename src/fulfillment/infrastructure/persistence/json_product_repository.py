"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import threading
from datetime import datetime
from pathlib import Path

from fulfillment.domain.model.product import Product, ProductType, as_utc
from fulfillment.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):
    """Stores the whole catalog in one JSON array.

    Rows are decoded only when requested, so one malformed row does not
    make the other products unreadable. A save rewrites the file, so saves
    are serialised with a lock; without it, concurrent saves of different
    products would overwrite each other. Reads and writes of the *same*
    product are still last-write-wins.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.RLock()
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        for raw in self._load_raw():
            if raw["name"].lower() == name.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, product: Product) -> None:
        with self._lock:
            records = self._load_raw()
            for i, raw in enumerate(records):
                if raw["id"] == product.id:
                    records[i] = self._to_raw(product)
                    break
            else:
                records.append(self._to_raw(product))
            self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "type": product.type.value,
            "name": product.name,
            "available": product.available,
            "lead_time": product.lead_time,
            "expiry_date": _format_date(product.expiry_date),
            "season_start": _format_date(product.season_start),
            "season_end": _format_date(product.season_end),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            type=ProductType.parse(raw["type"]),
            name=raw["name"],
            available=raw.get("available", 0),
            lead_time=raw.get("lead_time", 0),
            expiry_date=_parse_date(raw.get("expiry_date")),
            season_start=_parse_date(raw.get("season_start")),
            season_end=_parse_date(raw.get("season_end")),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        with self._lock:
            return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _format_date(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_date(value: str | None) -> datetime | None:
    """Dates stored without an offset are read as UTC."""
    return as_utc(datetime.fromisoformat(value)) if value else None
