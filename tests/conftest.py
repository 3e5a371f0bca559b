from datetime import datetime, timezone

import pytest

# Wednesday, January 15, 2025 12:00:00 UTC
NOW = int(datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc).timestamp())


@pytest.fixture
def now() -> int:
    return NOW


@pytest.fixture
def clock():
    """Clock frozen at `now`."""
    return lambda: NOW
