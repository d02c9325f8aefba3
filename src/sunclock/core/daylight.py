"""Sunrise and sunset times from the USNO almanac approximation.

Based loosely and indirectly on Kevin Boone's SunTimes implementation of
the US Naval Observatory's algorithm. Accurate to a minute or two outside
the polar circles. Results are anchored to UTC midnight of the reference
calendar date, so a western-longitude sunset can land before that day's
sunrise when the local evening crosses UTC midnight.
"""
from datetime import datetime, timedelta
import logging
import math

from ..errors import SolarEventNotVisible
from ..model.location import Location, validate_coordinates
from .timebase import DateLike, calendar_date, day_of_year, utc_midnight
from .trig import acos_deg, asin_deg, cos_deg, mod, rad_to_deg, sin_deg, tan_deg

logger = logging.getLogger(__name__)

DEGREES_PER_HOUR = 360 / 24
MS_PER_HOUR = 60 * 60 * 1000


class Zenith:
  """Common zenith angles in degrees."""
  OFFICIAL = 90.8333  # refraction + solar disk radius
  CIVIL = 96.0
  NAUTICAL = 102.0
  ASTRONOMICAL = 108.0


DEFAULT_ZENITH = Zenith.OFFICIAL


def compute_event(
  latitude: float,
  longitude: float,
  is_sunrise: bool,
  zenith: float,
  reference_date: DateLike,
) -> datetime:
  """Compute the UTC instant of sunrise or sunset.

  Args:
    latitude: Degrees, positive north, in [-90, 90]
    longitude: Degrees, positive east, in [-180, 180]
    is_sunrise: True for sunrise, False for sunset
    zenith: Sun's angular distance from overhead at the event, in degrees
    reference_date: Calendar day; any time-of-day component is ignored

  Returns:
    Aware UTC datetime, millisecond precision.

  Raises:
    InvalidLocation: coordinates out of range.
    SolarEventNotVisible: the sun never crosses the zenith threshold that day.
  """
  validate_coordinates(latitude, longitude)
  event = "sunrise" if is_sunrise else "sunset"

  hours_from_meridian = longitude / DEGREES_PER_HOUR
  doy = day_of_year(reference_date)
  approx_time_in_days = doy + (((6 if is_sunrise else 18) - hours_from_meridian) / 24)

  sun_mean_anomaly = (0.9856 * approx_time_in_days) - 3.289
  sun_true_longitude = (
    sun_mean_anomaly
    + (1.916 * sin_deg(sun_mean_anomaly))
    + (0.020 * sin_deg(2 * sun_mean_anomaly))
    + 282.634
  )
  sun_true_longitude = mod(sun_true_longitude, 360)

  right_ascension = rad_to_deg(math.atan(0.91764 * tan_deg(sun_true_longitude)))
  right_ascension = mod(right_ascension, 360)
  # RA must sit in the same quadrant as the true longitude
  l_quadrant = math.floor(sun_true_longitude / 90) * 90
  ra_quadrant = math.floor(right_ascension / 90) * 90
  right_ascension = (right_ascension + (l_quadrant - ra_quadrant)) / DEGREES_PER_HOUR

  sin_dec = 0.39782 * sin_deg(sun_true_longitude)
  cos_dec = cos_deg(asin_deg(sin_dec))
  cos_local_hour_angle = (cos_deg(zenith) - (sin_dec * sin_deg(latitude))) / (cos_dec * cos_deg(latitude))

  if not -1.0 <= cos_local_hour_angle <= 1.0:
    if cos_local_hour_angle > 1.0:
      reason = "never_rises"
    elif cos_local_hour_angle < -1.0:
      reason = "never_sets"
    else:
      reason = "undefined"
    day = calendar_date(reference_date)
    logger.info(f"No {event} at ({latitude}, {longitude}) on {day}: {reason}")
    raise SolarEventNotVisible(event, reason, cos_local_hour_angle, day)

  local_hour_angle = acos_deg(cos_local_hour_angle)
  if is_sunrise:
    local_hour_angle = 360 - local_hour_angle
  local_hour = local_hour_angle / DEGREES_PER_HOUR

  local_mean_time = local_hour + right_ascension - (0.06571 * approx_time_in_days) - 6.622
  hours = mod(local_mean_time - hours_from_meridian, 24)
  logger.debug(
    f"{event} doy={doy} M={sun_mean_anomaly:.4f} L={sun_true_longitude:.4f} "
    f"RA={right_ascension:.4f}h cosH={cos_local_hour_angle:.5f} UT={hours:.5f}h"
  )
  return utc_midnight(reference_date) + timedelta(milliseconds=int(hours * MS_PER_HOUR))


def sunrise_of(location: Location, day: DateLike, zenith: float = DEFAULT_ZENITH) -> datetime:
  return compute_event(location.latitude, location.longitude, True, zenith, day)


def sunset_of(location: Location, day: DateLike, zenith: float = DEFAULT_ZENITH) -> datetime:
  return compute_event(location.latitude, location.longitude, False, zenith, day)


def sunrise_sunset(location: Location, day: DateLike, zenith: float = DEFAULT_ZENITH) -> tuple[datetime, datetime]:
  return sunrise_of(location, day, zenith), sunset_of(location, day, zenith)
