import json
import logging
import sys
from datetime import datetime, timezone

import click
import yaml
from pydantic import ValidationError

from ..core.daylight import sunrise_sunset
from ..core.golden_hour import golden_hour_at
from ..errors import SolarError
from ..io.schema import GoldenHourRow, SunEventsRow
from ..io.write_jsonl import write_jsonl
from ..model.settings import SiteConfig, load_site_config


@click.command()
@click.option("--config", type=click.Path(exists=True), help="YAML site file (name, latitude, longitude, zenith, golden_hour_minutes)")
@click.option("--latitude", type=float, help="Degrees, positive north")
@click.option("--longitude", type=float, help="Degrees, positive east")
@click.option("--date", "day", type=click.DateTime(formats=["%Y-%m-%d"]), help="Calendar day (default: today, UTC)")
@click.option("--zenith", type=float, help="Zenith angle in degrees (default: 90.8333)")
@click.option("--golden-minutes", type=float, help="Golden hour half-width in minutes (default: 30)")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of text")
@click.option("--out", type=click.Path(dir_okay=False), help="Append the result rows to a JSONL file")
@click.option("--verbose", is_flag=True, help="Log intermediate values")
def main(config, latitude, longitude, day, zenith, golden_minutes, as_json, out, verbose):
  """Print sunrise, sunset and golden hour times for one location and day (UTC)."""
  logging.basicConfig(
    level=logging.DEBUG if verbose else logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
  )
  try:
    site = load_site_config(config) if config else None
    if site is None:
      if latitude is None or longitude is None:
        raise click.UsageError("Pass --config or both --latitude and --longitude")
      site = SiteConfig(latitude=latitude, longitude=longitude)
    overrides = {"latitude": latitude, "longitude": longitude}
    site = site.model_copy(update={k: v for k, v in overrides.items() if v is not None})
    settings = site.settings.model_copy(update={
      k: v for k, v in {"zenith": zenith, "golden_hour_minutes": golden_minutes}.items() if v is not None
    })
    location = site.location()
    d = day.date() if day else datetime.now(timezone.utc).date()
    sunrise, sunset = sunrise_sunset(location, d, settings.zenith)
    golden = golden_hour_at(location, d, settings)
  except (SolarError, ValidationError, yaml.YAMLError) as e:
    click.echo(f"ERROR: {e}", err=True)
    sys.exit(1)

  common = {"latitude": location.latitude, "longitude": location.longitude, "date": d, "zenith": settings.zenith}
  events = SunEventsRow(**common, sunrise=sunrise, sunset=sunset, name=site.name)
  golden_row = GoldenHourRow.from_golden_hour(golden, **common, minutes=settings.golden_hour_minutes)
  if out:
    write_jsonl([events, golden_row], out)
  if as_json:
    payload = {"events": events.model_dump(mode="json"), "golden_hour": golden_row.model_dump(mode="json")}
    click.echo(json.dumps(payload, indent=2))
    return
  label = site.name or f"{location.latitude}, {location.longitude}"
  click.echo(f"{label} on {d.isoformat()} (zenith {settings.zenith})")
  click.echo(f"Sunrise: {sunrise.isoformat()}")
  click.echo(f"Sunset:  {sunset.isoformat()}")
  click.echo(f"Golden hour (sunrise): {golden.sunrise}")
  click.echo(f"Golden hour (sunset):  {golden.sunset}")


if __name__ == "__main__":
  main()
