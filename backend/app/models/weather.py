"""WeatherReading ORM model — append-only cache of provider readings."""
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Float, DateTime, Index
from app.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WeatherReading(Base):
    __tablename__ = "weather_readings"
    __table_args__ = (
        Index("ix_weather_readings_city_timestamp", "city", "timestamp"),
    )

    reading_id = Column(Integer, primary_key=True, autoincrement=True)
    city = Column(String(255), nullable=False)
    temperature = Column(Float, nullable=False)
    description = Column(String(255), nullable=False)
    humidity = Column(Float, nullable=False)
    # Assigned in Python so successive inserts keep sub-second ordering on SQLite
    timestamp = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    def __repr__(self):
        return f"<WeatherReading(city='{self.city}', timestamp={self.timestamp})>"
