from datetime import datetime, timezone

import pytest

from tests.fakes import FakeClock, FakeLogger
from tests.settings import get_test_settings


@pytest.fixture
def test_settings():
    return get_test_settings()


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(fixed_now):
    return FakeClock(fixed_now)


@pytest.fixture
def logger():
    return FakeLogger()
