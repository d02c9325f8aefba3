"""Exceptions raised by the solar event calculator."""

from datetime import date
from typing import Optional


class SolarError(Exception):
  """Base class for every sunclock failure."""


class InvalidLocation(SolarError, ValueError):
  """Latitude or longitude is outside the valid range (or not a finite number)."""

  def __init__(self, latitude: float, longitude: float, message: Optional[str] = None):
    self.latitude = latitude
    self.longitude = longitude
    super().__init__(message or f"Invalid location: latitude={latitude}, longitude={longitude}")


class SolarEventNotVisible(SolarError):
  """The requested event does not happen at this location on this day.

  Raised when the cosine of the local hour angle falls outside [-1, 1],
  i.e. polar night ("never_rises") or midnight sun ("never_sets").
  """

  def __init__(self, event: str, reason: str, cos_local_hour_angle: float, day: Optional[date] = None):
    self.event = event
    self.reason = reason
    self.cos_local_hour_angle = cos_local_hour_angle
    self.date = day
    when = f" on {day.isoformat()}" if day else ""
    super().__init__(f"No {event}{when}: sun {reason.replace('_', ' ')} (cos H = {cos_local_hour_angle:.4f})")


class InvalidConfig(SolarError, ValueError):
  """A site configuration file is not a mapping of settings."""
