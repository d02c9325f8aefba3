"""API components for sunclock."""

from .rest import SunRestAPI, create_app

__all__ = [
    "SunRestAPI",
    "create_app",
]
