"""Pydantic schemas for weather readings."""
from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional, Union
from pydantic import BaseModel, field_validator


class WeatherRequest(BaseModel):
    city: Optional[str] = None


class WeatherOut(BaseModel):
    city: str
    temperature: Union[int, float]
    description: str
    humidity: Union[int, float]

    model_config = {"from_attributes": True}

    @field_validator("temperature", "humidity")
    @classmethod
    def _integral_as_int(cls, value: Union[int, float]) -> Union[int, float]:
        # Stored as Float; 15.0 goes back out as 15
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class WeatherReadingOut(WeatherOut):
    timestamp: datetime

    @field_validator("timestamp")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive datetimes; readings are always written in UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
