"""Shared fixtures for datecalc tests.

Local time is pinned to UTC so results do not depend on the host zone.
Tests that need another zone call set_local_timezone themselves; the
fixture restores the default afterwards.
"""

import pytest

from datecalc.config import set_local_timezone


@pytest.fixture(autouse=True)
def utc_local_time():
    """Run every test with UTC as the local time zone."""
    set_local_timezone("UTC")
    yield
    set_local_timezone(None)
