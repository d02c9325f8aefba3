from datetime import date, datetime, timedelta, timezone

import pytest

from sunclock.core.timebase import calendar_date, day_of_year, utc_midnight


def test_day_of_year_edges():
  assert day_of_year(date(2023, 1, 1)) == 1
  assert day_of_year(date(2023, 12, 31)) == 365
  assert day_of_year(date(2024, 12, 31)) == 366
  assert day_of_year(date(2024, 6, 21)) == 173


def test_time_of_day_is_ignored():
  assert day_of_year(datetime(2024, 3, 1, 0, 0)) == day_of_year(datetime(2024, 3, 1, 23, 59, 59))
  assert utc_midnight(datetime(2024, 3, 1, 18, 30)) == datetime(2024, 3, 1, tzinfo=timezone.utc)


def test_aware_datetime_keeps_its_own_calendar_day():
  tz = timezone(timedelta(hours=-5))
  local = datetime(2024, 3, 1, 22, 0, tzinfo=tz)  # 2024-03-02 03:00 UTC
  assert calendar_date(local) == date(2024, 3, 1)
  assert utc_midnight(local) == datetime(2024, 3, 1, tzinfo=timezone.utc)


def test_rejects_non_dates():
  with pytest.raises(TypeError):
    day_of_year("2024-01-01")
