"""
API Routers

Contains route handlers for weather forecasts.
"""

from . import forecasts

__all__ = ["forecasts"]
