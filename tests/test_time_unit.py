"""Time unit truncation and ISO-8601 rendering."""

from datetime import datetime, timedelta, timezone

import pytest

from glean_metrics.schemas import TimeUnit, get_iso_time_string, truncate


VALUE = datetime(2021, 11, 3, 14, 30, 15, 123456, tzinfo=timezone(timedelta(hours=5, minutes=30)))


class TestIsoTimeString:
    """Rendering at each precision."""

    @pytest.mark.parametrize(
        "unit,expected",
        [
            (TimeUnit.NANOSECOND, "2021-11-03T14:30:15.123456+05:30"),
            (TimeUnit.MICROSECOND, "2021-11-03T14:30:15.123456+05:30"),
            (TimeUnit.MILLISECOND, "2021-11-03T14:30:15.123+05:30"),
            (TimeUnit.SECOND, "2021-11-03T14:30:15+05:30"),
            (TimeUnit.MINUTE, "2021-11-03T14:30+05:30"),
            (TimeUnit.HOUR, "2021-11-03T14+05:30"),
            (TimeUnit.DAY, "2021-11-03+05:30"),
        ],
    )
    def test_each_precision(self, unit, expected):
        """Test every precision leaves out the finer fields."""
        assert get_iso_time_string(VALUE, unit) == expected

    def test_nanosecond_fraction_uses_fewest_digits(self):
        """Test nanosecond precision prints 3, 6 or no digits as needed."""
        whole = VALUE.replace(microsecond=0)
        millis = VALUE.replace(microsecond=250000)
        assert get_iso_time_string(whole, TimeUnit.NANOSECOND) == "2021-11-03T14:30:15+05:30"
        assert get_iso_time_string(millis, TimeUnit.NANOSECOND) == "2021-11-03T14:30:15.250+05:30"

    def test_explicit_nanoseconds_use_nine_digits(self):
        """Test a sub-microsecond fraction prints all nine digits."""
        value = VALUE.replace(microsecond=123456)
        assert get_iso_time_string(value, TimeUnit.NANOSECOND, 123_456_789) == "2021-11-03T14:30:15.123456789+05:30"
        assert get_iso_time_string(value.replace(microsecond=0), TimeUnit.NANOSECOND, 500) == "2021-11-03T14:30:15.000000500+05:30"

    def test_explicit_nanoseconds_at_coarser_precision(self):
        """Test millisecond and microsecond precision cut an explicit fraction."""
        assert get_iso_time_string(VALUE, TimeUnit.MILLISECOND, 123_456_789) == "2021-11-03T14:30:15.123+05:30"
        assert get_iso_time_string(VALUE, TimeUnit.MICROSECOND, 123_456_789) == "2021-11-03T14:30:15.123456+05:30"

    def test_microsecond_keeps_zeros(self):
        """Test microsecond precision always prints six digits."""
        assert get_iso_time_string(VALUE.replace(microsecond=0), TimeUnit.MICROSECOND) == "2021-11-03T14:30:15.000000+05:30"

    def test_negative_offset(self):
        """Test a negative offset is rendered with its sign."""
        value = datetime(2000, 1, 1, tzinfo=timezone(timedelta(hours=-8)))
        assert get_iso_time_string(value, TimeUnit.SECOND) == "2000-01-01T00:00:00-08:00"

    def test_utc_offset(self):
        """Test UTC renders as +00:00."""
        value = datetime(2000, 1, 1, tzinfo=timezone.utc)
        assert get_iso_time_string(value, TimeUnit.DAY) == "2000-01-01+00:00"

    def test_naive_value_rejected(self):
        """Test a naive datetime cannot be rendered."""
        with pytest.raises(ValueError):
            get_iso_time_string(datetime(2000, 1, 1), TimeUnit.DAY)


class TestTruncate:
    """Zeroing fields finer than the precision."""

    def test_millisecond(self):
        """Test millisecond truncation keeps whole milliseconds."""
        assert truncate(VALUE, TimeUnit.MILLISECOND).microsecond == 123000

    def test_hour(self):
        """Test hour truncation zeroes minutes and below."""
        assert truncate(VALUE, TimeUnit.HOUR) == VALUE.replace(minute=0, second=0, microsecond=0)

    def test_day_keeps_offset(self):
        """Test day truncation keeps the UTC offset."""
        result = truncate(VALUE, TimeUnit.DAY)
        assert (result.hour, result.minute, result.second, result.microsecond) == (0, 0, 0, 0)
        assert result.utcoffset() == timedelta(hours=5, minutes=30)

    def test_fine_units_unchanged(self):
        """Test sub-millisecond precisions leave the value alone."""
        assert truncate(VALUE, TimeUnit.NANOSECOND) == VALUE
        assert truncate(VALUE, TimeUnit.MICROSECOND) == VALUE
