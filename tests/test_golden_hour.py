from datetime import date, timedelta

import pytest

from sunclock.core.daylight import sunrise_of, sunset_of
from sunclock.core.golden_hour import HALF_HOUR, golden_hour_at, sunrise_golden_hour, sunset_golden_hour
from sunclock.errors import SolarEventNotVisible
from sunclock.model.location import Location
from sunclock.model.settings import SolarSettings

LONDON = Location(latitude=51.5074, longitude=-0.1278)
DAY = date(2024, 6, 21)


def test_half_hour_constant():
  assert HALF_HOUR == timedelta(milliseconds=1_800_000)


def test_spans_are_event_plus_minus_half_hour():
  golden = golden_hour_at(LONDON, DAY)
  sunrise = sunrise_of(LONDON, DAY)
  sunset = sunset_of(LONDON, DAY)
  assert golden.sunrise.start == sunrise - HALF_HOUR
  assert golden.sunrise.end == sunrise + HALF_HOUR
  assert golden.sunset.start == sunset - HALF_HOUR
  assert golden.sunset.end == sunset + HALF_HOUR
  assert golden.sunrise.duration == timedelta(hours=1)


def test_single_span_helpers_match():
  golden = golden_hour_at(LONDON, DAY)
  assert sunrise_golden_hour(LONDON, DAY) == golden.sunrise
  assert sunset_golden_hour(LONDON, DAY) == golden.sunset


def test_custom_settings():
  settings = SolarSettings(zenith=96.0, golden_hour_minutes=45)
  span = sunset_golden_hour(LONDON, DAY, settings)
  dusk = sunset_of(LONDON, DAY, 96.0)
  assert span.start == dusk - timedelta(minutes=45)
  assert span.duration == timedelta(minutes=90)


def test_not_visible_propagates():
  with pytest.raises(SolarEventNotVisible):
    golden_hour_at(Location(latitude=89.0, longitude=0.0), date(2024, 12, 21))
