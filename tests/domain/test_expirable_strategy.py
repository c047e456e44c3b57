"""Unit tests for the EXPIRABLE product strategy."""

from datetime import datetime, timedelta, timezone

from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.model.result import OrderProcessingResult
from fulfillment.domain.strategy.base import StrategyContext
from fulfillment.domain.strategy.expirable import ExpirableProductStrategy
from tests.fakes import FakeProductRepository, RecordingNotificationService

NOW = datetime(2026, 6, 15, 12, 0, tzinfo=timezone.utc)
DAY = timedelta(days=1)


def _setup(available: int, expiry_date: datetime | None):
    product = Product(
        id="7", type=ProductType.EXPIRABLE, name="Butter",
        available=available, lead_time=15, expiry_date=expiry_date,
    )
    repo = FakeProductRepository([product])
    ns = RecordingNotificationService()
    return product, repo, ns, StrategyContext(product_repo=repo, notifications=ns)


def _process(product, ctx):
    return ExpirableProductStrategy().process_order(product, ctx, NOW)


class TestExpirableFresh:

    def test_decrements_before_expiry(self):
        product, repo, ns, ctx = _setup(30, NOW + 26 * DAY)

        result = _process(product, ctx)

        assert result == OrderProcessingResult.decremented()
        assert repo.get_by_id("7").available == 29
        assert ns.calls == []


class TestExpirableExpired:

    def test_expired_product_notifies_and_forces_zero(self):
        expiry = NOW - 2 * DAY
        product, repo, ns, ctx = _setup(6, expiry)

        result = _process(product, ctx)

        assert result == OrderProcessingResult.rejected_and_updated()
        assert ns.calls == [("expiration", "Butter", expiry)]
        assert repo.saved_ids == ["7"]
        assert repo.get_by_id("7").available == 0

    def test_expiring_exactly_now_counts_as_expired(self):
        product, _, ns, ctx = _setup(6, NOW)

        result = _process(product, ctx)

        assert not result.success
        assert ns.calls == [("expiration", "Butter", NOW)]
        assert product.available == 0

    def test_out_of_stock_before_expiry_notifies_expiration(self):
        expiry = NOW + 10 * DAY
        product, repo, ns, ctx = _setup(0, expiry)

        result = _process(product, ctx)

        assert result == OrderProcessingResult.rejected_and_updated()
        assert ns.calls == [("expiration", "Butter", expiry)]
        assert repo.saved_ids == ["7"]


class TestExpirableMissingExpiry:

    def test_missing_expiry_is_a_silent_no_op(self):
        product, repo, ns, ctx = _setup(4, None)

        result = _process(product, ctx)

        assert result == OrderProcessingResult.rejected()
        assert ns.calls == []
        assert repo.saved_ids == []
        assert product.available == 4
