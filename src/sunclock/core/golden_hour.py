"""Golden hour windows: a fixed offset either side of sunrise and sunset.

Nothing is cached; each call recomputes the underlying event.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ..model.location import Location
from ..model.settings import SolarSettings
from ..model.timespan import TimeSpan, make_time_span
from .daylight import sunrise_of, sunset_of
from .timebase import DateLike

HALF_HOUR = timedelta(minutes=30)


@dataclass(frozen=True)
class GoldenHour:
  sunrise: TimeSpan
  sunset: TimeSpan


def _offset(settings: SolarSettings) -> timedelta:
  return timedelta(minutes=settings.golden_hour_minutes)


def window_around(instant: datetime, offset: timedelta = HALF_HOUR) -> TimeSpan:
  return make_time_span(instant - offset, instant + offset)


def sunrise_golden_hour(location: Location, day: DateLike, settings: Optional[SolarSettings] = None) -> TimeSpan:
  settings = settings or SolarSettings()
  return window_around(sunrise_of(location, day, settings.zenith), _offset(settings))


def sunset_golden_hour(location: Location, day: DateLike, settings: Optional[SolarSettings] = None) -> TimeSpan:
  settings = settings or SolarSettings()
  return window_around(sunset_of(location, day, settings.zenith), _offset(settings))


def golden_hour_at(location: Location, day: DateLike, settings: Optional[SolarSettings] = None) -> GoldenHour:
  """Both golden hour spans for a location and day.

  Raises whatever the calculator raises (InvalidLocation, SolarEventNotVisible).
  """
  return GoldenHour(
    sunrise=sunrise_golden_hour(location, day, settings),
    sunset=sunset_golden_hour(location, day, settings),
  )
