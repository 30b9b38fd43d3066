"""Tests for datecalc/config.py"""

from datetime import datetime, timedelta

import pytest
from dateutil import tz

from datecalc import InvalidArgumentError, get_local_timezone, set_local_timezone
from datecalc.config import TZ_ENV_VAR


class TestLocalTimezone:
    """Tests for the local time zone setting."""

    def test_set_by_name(self):
        set_local_timezone("Asia/Tokyo")
        offset = get_local_timezone().utcoffset(datetime(2024, 1, 1))
        assert offset == timedelta(hours=9)

    def test_set_by_tzinfo(self):
        set_local_timezone(tz.UTC)
        assert get_local_timezone() is tz.UTC

    def test_default_read_from_environment(self, monkeypatch):
        monkeypatch.setenv(TZ_ENV_VAR, "Asia/Tokyo")
        set_local_timezone(None)
        offset = get_local_timezone().utcoffset(datetime(2024, 1, 1))
        assert offset == timedelta(hours=9)

    def test_default_falls_back_to_system_zone(self, monkeypatch):
        monkeypatch.delenv(TZ_ENV_VAR, raising=False)
        set_local_timezone(None)
        assert isinstance(get_local_timezone(), tz.tzlocal)

    def test_rejects_unknown_zone(self):
        with pytest.raises(InvalidArgumentError):
            set_local_timezone("Nowhere/Atlantis")

    def test_rejects_unsupported_types(self):
        with pytest.raises(TypeError):
            set_local_timezone(9)
