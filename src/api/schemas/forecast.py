"""
Weather forecast Pydantic schemas

Defines request and response models for forecast endpoints.
"""

import uuid
import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================
# Request Models
# ============================================================

class ForecastCreateRequest(BaseModel):
    """POST /api/v1/forecasts request"""
    uid: Optional[uuid.UUID] = Field(None, description="Record uid, generated when omitted")
    date: datetime.date = Field(..., description="Forecast date")
    temperature_c: int = Field(..., description="Temperature in Celsius")
    summary: Optional[str] = Field(None, max_length=64, description="Short description")


class ForecastUpdateRequest(BaseModel):
    """PUT /api/v1/forecasts/{uid} request, omitted fields keep their value"""
    date: Optional[datetime.date] = Field(None, description="Forecast date")
    temperature_c: Optional[int] = Field(None, description="Temperature in Celsius")
    summary: Optional[str] = Field(None, max_length=64, description="Short description")


# ============================================================
# Response Models
# ============================================================

class ForecastResponse(BaseModel):
    """Single forecast"""
    model_config = ConfigDict(from_attributes=True)

    uid: uuid.UUID = Field(..., description="Record uid")
    date: datetime.date = Field(..., description="Forecast date")
    temperature_c: int = Field(..., description="Temperature in Celsius")
    temperature_f: int = Field(..., description="Temperature in Fahrenheit")
    summary: Optional[str] = Field(None, description="Short description")


class ForecastListResponse(BaseModel):
    """GET /api/v1/forecasts response"""
    items: List[ForecastResponse] = Field(..., description="Forecasts in the requested page")
    total_count: int = Field(..., description="Number of forecasts matching the filters")
    start_index: int = Field(..., description="Index of the first returned item")
    page_size: int = Field(..., description="Requested page size (0 = everything)")


class CommandResponse(BaseModel):
    """Result of a create / update / delete"""
    successful: bool = Field(..., description="Whether the command succeeded")
    message: Optional[str] = Field(None, description="Human readable status")
    uid: Optional[uuid.UUID] = Field(None, description="Uid of the affected record")
