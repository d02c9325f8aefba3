from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel

from ..core.daylight import DEFAULT_ZENITH
from ..errors import InvalidConfig
from .location import Location


class SolarSettings(BaseModel):
  zenith: float = DEFAULT_ZENITH
  golden_hour_minutes: float = 30.0


class SiteConfig(BaseModel):
  latitude: float
  longitude: float
  name: Optional[str] = None
  settings: SolarSettings = SolarSettings()

  def location(self) -> Location:
    return Location(latitude=self.latitude, longitude=self.longitude)


def load_site_config(path: Union[str, Path]) -> SiteConfig:
  """Read a site from YAML. Flat zenith/golden_hour_minutes keys are folded into settings."""
  cfg = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
  if not isinstance(cfg, dict):
    raise InvalidConfig(f"{path}: expected a mapping at the top level, got {type(cfg).__name__}")
  settings = dict(cfg.pop("settings", None) or {})
  for key in SolarSettings.model_fields:
    if key in cfg:
      settings[key] = cfg.pop(key)
  site = SiteConfig(**cfg, settings=SolarSettings(**settings))
  site.location()  # raises InvalidLocation
  return site
