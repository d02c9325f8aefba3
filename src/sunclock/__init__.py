"""Sunrise, sunset and golden hour times for a location and day."""

from .core.daylight import DEFAULT_ZENITH, Zenith, compute_event, sunrise_of, sunrise_sunset, sunset_of
from .core.golden_hour import HALF_HOUR, GoldenHour, golden_hour_at, sunrise_golden_hour, sunset_golden_hour
from .errors import InvalidConfig, InvalidLocation, SolarError, SolarEventNotVisible
from .model.location import Location
from .model.settings import SiteConfig, SolarSettings, load_site_config
from .model.timespan import TimeSpan, make_time_span, render_time_span

__all__ = [
    "DEFAULT_ZENITH",
    "Zenith",
    "compute_event",
    "sunrise_of",
    "sunset_of",
    "sunrise_sunset",
    "HALF_HOUR",
    "GoldenHour",
    "golden_hour_at",
    "sunrise_golden_hour",
    "sunset_golden_hour",
    "SolarError",
    "InvalidConfig",
    "InvalidLocation",
    "SolarEventNotVisible",
    "Location",
    "SiteConfig",
    "SolarSettings",
    "load_site_config",
    "TimeSpan",
    "make_time_span",
    "render_time_span",
]
