import math

import pytest

from sunclock.core.trig import acos_deg, asin_deg, cos_deg, deg_to_rad, mod, rad_to_deg, sin_deg, tan_deg


def test_degree_helpers():
  assert sin_deg(30) == pytest.approx(0.5)
  assert cos_deg(60) == pytest.approx(0.5)
  assert tan_deg(45) == pytest.approx(1.0)
  assert asin_deg(0.5) == pytest.approx(30.0)
  assert acos_deg(0.0) == pytest.approx(90.0)
  assert rad_to_deg(deg_to_rad(123.4)) == pytest.approx(123.4)


def test_acos_outside_domain_raises():
  with pytest.raises(ValueError):
    acos_deg(1.5)


@pytest.mark.parametrize("a,b,expected", [
  (725, 360, 5),
  (-30, 360, 330),
  (360, 360, 0),
  (-24.5, 24, 23.5),
  (0, 24, 0),
])
def test_mod_values(a, b, expected):
  assert mod(a, b) == pytest.approx(expected)


@pytest.mark.parametrize("a", [-1e-20, -1e-12, -359.9999999, 1e9 + 0.5, -1e9 - 0.5, math.pi])
def test_mod_stays_in_range(a):
  for b in (24, 360):
    r = mod(a, b)
    assert 0 <= r < b
