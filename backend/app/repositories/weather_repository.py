"""Weather reading persistence."""
from typing import Any, Optional, Protocol

from sqlalchemy.orm import Session

from app.models.weather import WeatherReading


class WeatherRepository(Protocol):
    def insert_reading(self, weather_data: dict[str, Any]) -> WeatherReading:
        ...

    def latest_reading_for_city(self, city: str) -> Optional[WeatherReading]:
        ...


class SqlWeatherRepository:
    """SQLAlchemy-backed store; the (city, timestamp) index serves the latest lookup."""

    def __init__(self, db: Session):
        self.db = db

    def insert_reading(self, weather_data: dict[str, Any]) -> WeatherReading:
        reading = WeatherReading(**weather_data)
        self.db.add(reading)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(reading)
        return reading

    def latest_reading_for_city(self, city: str) -> Optional[WeatherReading]:
        return (
            self.db.query(WeatherReading)
            .filter(WeatherReading.city == city)
            .order_by(WeatherReading.timestamp.desc(), WeatherReading.reading_id.desc())
            .first()
        )
