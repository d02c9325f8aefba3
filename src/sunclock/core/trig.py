"""Trigonometry in degrees, plus a modulo that never goes negative."""
import math


def deg_to_rad(deg: float) -> float:
  return deg * math.pi / 180


def rad_to_deg(rad: float) -> float:
  return rad * 180.0 / math.pi


def sin_deg(deg: float) -> float:
  return math.sin(deg_to_rad(deg))


def cos_deg(deg: float) -> float:
  return math.cos(deg_to_rad(deg))


def tan_deg(deg: float) -> float:
  return math.tan(deg_to_rad(deg))


def asin_deg(x: float) -> float:
  """Arc-sine in degrees; x must lie in [-1, 1]."""
  return rad_to_deg(math.asin(x))


def acos_deg(x: float) -> float:
  """Arc-cosine in degrees; x must lie in [-1, 1]."""
  return rad_to_deg(math.acos(x))


def mod(a: float, b: float) -> float:
  """Mathematical modulo for positive b: the result is always in [0, b)."""
  result = math.fmod(a, b)
  if result < 0:
    result += b
  # -1e-20 + 360 rounds back up to 360
  if result >= b:
    result -= b
  return result
