from datetime import datetime, timedelta

from fastapi.testclient import TestClient

from sunclock.api.rest import create_app
from sunclock.model.settings import SolarSettings


def _parse(ts):
  return datetime.fromisoformat(ts.replace("Z", "+00:00"))


def test_health():
  client = TestClient(create_app())
  response = client.get("/health")
  assert response.status_code == 200
  assert response.json()["status"] == "healthy"


def test_sun_endpoint():
  client = TestClient(create_app())
  response = client.get("/api/sun", params={"latitude": 51.5074, "longitude": -0.1278, "date": "2024-06-21"})
  assert response.status_code == 200
  data = response.json()
  assert data["date"] == "2024-06-21"
  assert data["zenith"] == 90.8333
  assert _parse(data["sunrise"]) < _parse(data["sunset"])
  assert _parse(data["sunrise"]).hour == 3


def test_golden_hour_endpoint_uses_minutes():
  client = TestClient(create_app())
  response = client.get(
    "/api/golden_hour",
    params={"latitude": 51.5074, "longitude": -0.1278, "date": "2024-06-21", "minutes": 15},
  )
  assert response.status_code == 200
  data = response.json()
  assert data["minutes"] == 15
  span = data["sunset"]
  assert _parse(span["end"]) - _parse(span["start"]) == timedelta(minutes=30)
  assert span["text"].startswith("from ")


def test_app_settings_are_defaults():
  client = TestClient(create_app(SolarSettings(zenith=96.0)))
  response = client.get("/api/sun", params={"latitude": 51.5074, "longitude": -0.1278, "date": "2024-03-20"})
  assert response.json()["zenith"] == 96.0


def test_invalid_location_is_400():
  client = TestClient(create_app())
  response = client.get("/api/sun", params={"latitude": 123, "longitude": 0, "date": "2024-06-21"})
  assert response.status_code == 400
  assert "Latitude" in response.json()["detail"]


def test_polar_night_is_404():
  client = TestClient(create_app())
  response = client.get("/api/golden_hour", params={"latitude": 89, "longitude": 0, "date": "2024-12-21"})
  assert response.status_code == 404
  assert "never rises" in response.json()["detail"]
