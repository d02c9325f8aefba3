from dataclasses import dataclass
import math

from ..errors import InvalidLocation


def validate_coordinates(latitude: float, longitude: float) -> None:
  """Raise InvalidLocation unless latitude is in [-90, 90] and longitude in [-180, 180]."""
  try:
    lat, lon = float(latitude), float(longitude)
  except (TypeError, ValueError) as e:
    raise InvalidLocation(latitude, longitude, f"Coordinates must be numbers: {e}") from e
  if not (math.isfinite(lat) and math.isfinite(lon)):
    raise InvalidLocation(latitude, longitude, "Coordinates must be finite")
  if not -90.0 <= lat <= 90.0:
    raise InvalidLocation(latitude, longitude, f"Latitude {lat} outside [-90, 90]")
  if not -180.0 <= lon <= 180.0:
    raise InvalidLocation(latitude, longitude, f"Longitude {lon} outside [-180, 180]")


@dataclass(frozen=True)
class Location:
  latitude: float
  longitude: float

  def __post_init__(self):
    validate_coordinates(self.latitude, self.longitude)
