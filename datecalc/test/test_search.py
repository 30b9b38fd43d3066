"""Tests for datecalc/search.py"""

from datetime import date, datetime

import pytest
from dateutil import tz
from dateutil.relativedelta import relativedelta

from datecalc import Weekday, get_next_friday, get_next_friday_the_13th


class TestNextFriday:
    """Tests for the next Friday after a date."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (date(2024, 2, 3), date(2024, 2, 9)),
            (date(2024, 2, 4), date(2024, 2, 9)),
            (date(2024, 2, 13), date(2024, 2, 16)),
            (date(2024, 2, 16), date(2024, 2, 23)),
        ],
    )
    def test_dates(self, value, expected):
        assert get_next_friday(value) == expected

    def test_strings_return_aware_datetimes(self):
        result = get_next_friday("2024-02-03T00:00:00Z")
        assert result == datetime(2024, 2, 9, tzinfo=tz.UTC)

    def test_keeps_time_of_day(self):
        assert get_next_friday(datetime(2024, 2, 13, 15, 30)) == datetime(2024, 2, 16, 15, 30)

    def test_does_not_touch_argument(self):
        value = datetime(2024, 2, 3, tzinfo=tz.UTC)
        get_next_friday(value)
        assert value == datetime(2024, 2, 3, tzinfo=tz.UTC)

    def test_weekday_is_read_in_utc(self):
        # Friday 23:30 UTC is already Saturday in Tokyo; the UTC weekday wins
        value = datetime(2024, 2, 16, 23, 30, tzinfo=tz.UTC).astimezone(tz.gettz("Asia/Tokyo"))
        assert get_next_friday(value) == datetime(2024, 2, 23, 23, 30, tzinfo=tz.UTC)


class TestNextFridayThe13th:
    """Tests for the Friday-the-13th scan."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (date(2024, 1, 13), date(2024, 9, 13)),
            (date(2023, 2, 1), date(2023, 10, 13)),
            (date(2024, 9, 14), date(2024, 12, 13)),
            (date(2024, 12, 14), date(2025, 6, 13)),
        ],
    )
    def test_documented_examples(self, value, expected):
        assert get_next_friday_the_13th(value) == expected

    def test_includes_start_day(self):
        assert get_next_friday_the_13th(date(2023, 10, 13)) == date(2023, 10, 13)

    def test_datetime_returns_local_midnight(self):
        assert get_next_friday_the_13th(datetime(2024, 1, 13, 10, 0)) == datetime(2024, 9, 13)

    def test_every_result_is_friday_the_13th(self):
        start = date(2019, 1, 1)
        for months in range(0, 96, 5):
            value = start + relativedelta(months=months, days=months % 28)
            result = get_next_friday_the_13th(value)
            assert result.day == 13
            assert Weekday.of(result) is Weekday.FRIDAY
            assert result >= value
