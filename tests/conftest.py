import pytest
import structlog

from fulfillment.infrastructure.config import get_settings


@pytest.fixture(autouse=True)
def _reset_logging_and_settings():
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()
