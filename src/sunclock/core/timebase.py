from datetime import date, datetime, timezone
from typing import Union

DateLike = Union[date, datetime]


def calendar_date(value: DateLike) -> date:
  # datetime is a subclass of date, check it first. Aware values keep their own calendar day.
  if isinstance(value, datetime):
    return value.date()
  if isinstance(value, date):
    return value
  raise TypeError(f"Expected a date or datetime, got {type(value).__name__}")


def day_of_year(value: DateLike) -> int:
  """1-based ordinal of the day within its year: Jan 1 -> 1, Dec 31 -> 365 or 366."""
  return calendar_date(value).timetuple().tm_yday


def utc_midnight(value: DateLike) -> datetime:
  d = calendar_date(value)
  return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
