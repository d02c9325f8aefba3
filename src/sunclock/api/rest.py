"""REST API exposing sunrise, sunset and golden hour calculations."""

from datetime import date, datetime, timezone
from typing import Optional
import logging

from fastapi import FastAPI, HTTPException, Query

from ..core.daylight import sunrise_sunset
from ..core.golden_hour import golden_hour_at
from ..errors import InvalidLocation, SolarEventNotVisible
from ..io.schema import GoldenHourRow, SunEventsRow
from ..model.location import Location
from ..model.settings import SolarSettings

logger = logging.getLogger(__name__)


class SunRestAPI:
    """HTTP front end for the solar event calculator."""

    def __init__(self, settings: Optional[SolarSettings] = None):
        """Initialize REST API.

        Args:
            settings: Defaults used when a request omits zenith or minutes
        """
        self.settings = settings or SolarSettings()
        self.app = FastAPI(
            title="sunclock API",
            description="Sunrise, sunset and golden hour times",
            version="1.0.0",
        )
        self._setup_routes()

    def _resolve(
        self,
        latitude: float,
        longitude: float,
        zenith: Optional[float],
        minutes: Optional[float] = None,
    ):
        try:
            location = Location(latitude=latitude, longitude=longitude)
        except InvalidLocation as e:
            raise HTTPException(status_code=400, detail=str(e))
        settings = self.settings.model_copy(update={
            k: v for k, v in {"zenith": zenith, "golden_hour_minutes": minutes}.items() if v is not None
        })
        return location, settings

    def _setup_routes(self) -> None:
        """Setup all API routes."""

        @self.app.get("/health")
        async def health():
            return {
                "status": "healthy",
                "time": datetime.now(timezone.utc).isoformat(),
            }

        @self.app.get("/api/sun", response_model=SunEventsRow)
        async def get_sun(
            latitude: float,
            longitude: float,
            day: Optional[date] = Query(None, alias="date"),
            zenith: Optional[float] = None,
        ):
            """Sunrise and sunset for a location and day (default: today, UTC)."""
            location, settings = self._resolve(latitude, longitude, zenith)
            day = day or datetime.now(timezone.utc).date()
            try:
                sunrise, sunset = sunrise_sunset(location, day, settings.zenith)
            except SolarEventNotVisible as e:
                logger.info(f"Event not visible: {e}")
                raise HTTPException(status_code=404, detail=str(e))
            return SunEventsRow(
                latitude=location.latitude,
                longitude=location.longitude,
                date=day,
                zenith=settings.zenith,
                sunrise=sunrise,
                sunset=sunset,
            )

        @self.app.get("/api/golden_hour", response_model=GoldenHourRow)
        async def get_golden_hour(
            latitude: float,
            longitude: float,
            day: Optional[date] = Query(None, alias="date"),
            zenith: Optional[float] = None,
            minutes: Optional[float] = None,
        ):
            """Golden hour spans around sunrise and sunset."""
            location, settings = self._resolve(latitude, longitude, zenith, minutes)
            day = day or datetime.now(timezone.utc).date()
            try:
                golden = golden_hour_at(location, day, settings)
            except SolarEventNotVisible as e:
                logger.info(f"Event not visible: {e}")
                raise HTTPException(status_code=404, detail=str(e))
            return GoldenHourRow.from_golden_hour(
                golden,
                latitude=location.latitude,
                longitude=location.longitude,
                date=day,
                zenith=settings.zenith,
                minutes=settings.golden_hour_minutes,
            )


def create_app(settings: Optional[SolarSettings] = None) -> FastAPI:
    return SunRestAPI(settings).app
