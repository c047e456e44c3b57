"""Unit tests for the OrderFulfillmentService domain service."""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest
from structlog.testing import capture_logs

from fulfillment.domain.exceptions import UnsupportedProductTypeError
from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.model.result import OrderProcessingResult
from fulfillment.domain.service.order_fulfillment_service import (
    OrderFulfillmentService,
)
from fulfillment.domain.strategy.base import ProductStrategy
from fulfillment.domain.strategy.standard import StandardProductStrategy
from tests.fakes import (
    FailingNotificationService,
    FakeProductRepository,
    RecordingNotificationService,
)

NOW = datetime(2026, 6, 15, 12, 0, tzinfo=timezone.utc)
DAY = timedelta(days=1)


def _products() -> list[Product]:
    return [
        Product(id="1", type=ProductType.STANDARD, name="USB Cable", available=5, lead_time=15),
        Product(id="2", type=ProductType.STANDARD, name="USB Dongle", available=0, lead_time=10),
        Product(
            id="3", type=ProductType.SEASONAL, name="Watermelon", available=10, lead_time=15,
            season_start=NOW - 2 * DAY, season_end=NOW + 58 * DAY,
        ),
        Product(
            id="4", type=ProductType.EXPIRABLE, name="Butter", available=30, lead_time=15,
            expiry_date=NOW - DAY,
        ),
    ]


def _service(products=None, notifications=None, **kwargs):
    repo = FakeProductRepository(products if products is not None else _products())
    ns = notifications or RecordingNotificationService()
    svc = OrderFulfillmentService(repo, ns, clock=lambda: NOW, **kwargs)
    return svc, repo, ns


class TestProcessOne:

    def test_dispatches_by_product_type(self):
        svc, repo, ns = _service()

        assert svc.process_one(repo.get_by_id("1")) == OrderProcessingResult.decremented()
        assert svc.process_one(repo.get_by_id("2")) == OrderProcessingResult.delayed()
        assert svc.process_one(repo.get_by_id("3")) == OrderProcessingResult.decremented()
        assert svc.process_one(repo.get_by_id("4")) == OrderProcessingResult.rejected_and_updated()

    def test_unregistered_type_rejected_with_type_in_message(self):
        svc, repo, _ = _service(
            strategies={ProductType.STANDARD: StandardProductStrategy()},
        )

        with pytest.raises(UnsupportedProductTypeError, match="EXPIRABLE") as exc_info:
            svc.process_one(repo.get_by_id("4"))

        assert exc_info.value.product_type is ProductType.EXPIRABLE
        assert repo.saved_ids == []

    def test_clock_read_once_per_invocation(self):
        ticks = []

        def clock():
            ticks.append(1)
            return NOW

        repo = FakeProductRepository(_products())
        svc = OrderFulfillmentService(repo, RecordingNotificationService(), clock=clock)
        svc.process_one(repo.get_by_id("3"))

        assert len(ticks) == 1

    def test_registered_strategy_replaces_builtin(self):
        class AlwaysRejectStrategy(ProductStrategy):
            product_type = ProductType.STANDARD

            def process_order(self, product, context, now):
                return OrderProcessingResult.rejected()

        svc, repo, _ = _service()
        svc.register(ProductType.STANDARD, AlwaysRejectStrategy())

        assert svc.process_one(repo.get_by_id("1")) == OrderProcessingResult.rejected()
        assert repo.get_by_id("1").available == 5

    def test_sequential_decrements_stop_at_zero(self):
        product = Product(id="9", type=ProductType.STANDARD, name="Cable", available=2, lead_time=0)
        svc, _, _ = _service(products=[product])

        first = svc.process_one(product)
        second = svc.process_one(product)
        third = svc.process_one(product)

        assert first.available_decremented and second.available_decremented
        assert third == OrderProcessingResult.rejected()
        assert product.available == 0


class TestProcessMany:

    def test_returns_one_result_per_product_in_input_order(self):
        svc, repo, _ = _service()
        products = repo.list_all()

        results = asyncio.run(svc.process_many(products))

        assert results == [
            OrderProcessingResult.decremented(),
            OrderProcessingResult.delayed(),
            OrderProcessingResult.decremented(),
            OrderProcessingResult.rejected_and_updated(),
        ]

    def test_products_do_not_affect_each_other(self):
        svc, repo, ns = _service()

        svc.process_many_sync(repo.list_all())

        assert repo.get_by_id("1").available == 4
        assert repo.get_by_id("2").available == 0
        assert repo.get_by_id("3").available == 9
        assert repo.get_by_id("4").available == 0
        assert sorted(ns.calls, key=lambda c: c[0]) == [
            ("delay", 10, "USB Dongle"),
            ("expiration", "Butter", NOW - DAY),
        ]

    def test_empty_batch(self):
        svc, _, _ = _service()
        assert svc.process_many_sync([]) == []

    def test_unsupported_type_fails_whole_batch(self):
        svc, repo, _ = _service(
            strategies={
                ProductType.STANDARD: StandardProductStrategy(),
            },
        )

        with pytest.raises(UnsupportedProductTypeError, match="SEASONAL"):
            svc.process_many_sync(repo.list_all())


class TestNotificationFailures:

    def test_failing_port_is_logged_and_processing_continues(self):
        svc, repo, _ = _service(notifications=FailingNotificationService())

        with capture_logs() as logs:
            result = svc.process_one(repo.get_by_id("4"))

        assert result == OrderProcessingResult.rejected_and_updated()
        assert repo.get_by_id("4").available == 0
        failures = [entry for entry in logs if entry["event"] == "notification.failed"]
        assert len(failures) == 1
        assert failures[0]["product_id"] == "4"
        assert failures[0]["notification"] == "notify_expiration"
