from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class TimeSpan:
  """Ordered pair of instants; a reversed pair is swapped so start <= end."""
  start: datetime
  end: datetime

  def __post_init__(self):
    if self.start > self.end:
      start, end = self.end, self.start
      object.__setattr__(self, "start", start)
      object.__setattr__(self, "end", end)

  @property
  def duration(self) -> timedelta:
    return self.end - self.start

  def __str__(self) -> str:
    return render_time_span(self)


def make_time_span(a: datetime, b: datetime) -> TimeSpan:
  return TimeSpan(start=a, end=b)


def render_time_span(span: TimeSpan) -> str:
  return f"from {span.start.isoformat()} to {span.end.isoformat()}"
