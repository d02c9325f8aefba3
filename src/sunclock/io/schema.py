import datetime as dt
from typing import Optional

from pydantic import BaseModel

from ..core.golden_hour import GoldenHour
from ..model.timespan import TimeSpan


class TimeSpanRow(BaseModel):
  start: dt.datetime
  end: dt.datetime
  text: str

  @classmethod
  def from_span(cls, span: TimeSpan) -> "TimeSpanRow":
    return cls(start=span.start, end=span.end, text=str(span))


class SunEventsRow(BaseModel):
  latitude: float
  longitude: float
  date: dt.date
  zenith: float
  sunrise: dt.datetime
  sunset: dt.datetime
  name: Optional[str] = None


class GoldenHourRow(BaseModel):
  latitude: float
  longitude: float
  date: dt.date
  zenith: float
  minutes: float
  sunrise: TimeSpanRow
  sunset: TimeSpanRow

  @classmethod
  def from_golden_hour(cls, golden: GoldenHour, **fields) -> "GoldenHourRow":
    return cls(
      sunrise=TimeSpanRow.from_span(golden.sunrise),
      sunset=TimeSpanRow.from_span(golden.sunset),
      **fields,
    )
