from datetime import datetime, timezone

import pytest

from loggan import shutdown


@pytest.fixture
def now():
    return datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _reset_global_logger():
    yield
    shutdown()
