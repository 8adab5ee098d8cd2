"""
Pydantic Schemas

Request and response models for the API.
"""

from .forecast import (
    ForecastCreateRequest,
    ForecastUpdateRequest,
    ForecastResponse,
    ForecastListResponse,
    CommandResponse,
)

__all__ = [
    "ForecastCreateRequest",
    "ForecastUpdateRequest",
    "ForecastResponse",
    "ForecastListResponse",
    "CommandResponse",
]
