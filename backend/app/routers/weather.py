"""Weather routes. Mounted behind the auth gate in ``app.main``."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Request

from app.dependencies import get_weather_service
from app.errors import ValidationError, WeatherAppError
from app.schemas.weather import WeatherOut, WeatherReadingOut, WeatherRequest
from app.services.weather_service import WeatherService

logger = logging.getLogger(__name__)
router = APIRouter()

CITY_REQUIRED = "City name is required"


@router.post("", response_model=WeatherOut)
def fetch_weather(
    request: Request,
    payload: Optional[WeatherRequest] = None,
    service: WeatherService = Depends(get_weather_service),
):
    """Fetch current weather from the provider, cache it, and return it."""
    city = ((payload.city if payload else None) or "").strip()
    if not city:
        raise ValidationError(CITY_REQUIRED)

    logger.info("User %s requested fresh weather for %r", request.state.user.user_id, city)
    try:
        return service.execute(city)
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.get("/", include_in_schema=False)
def get_weather_without_city():
    raise ValidationError(CITY_REQUIRED)


@router.get("/{city}", response_model=WeatherReadingOut)
def get_weather(city: str, service: WeatherService = Depends(get_weather_service)):
    """Return the latest cached reading for a city without calling the provider."""
    city = city.strip()
    if not city:
        raise ValidationError(CITY_REQUIRED)

    try:
        return service.get_weather(city)
    except Exception as exc:
        if not isinstance(exc, WeatherAppError):
            logger.exception("Cached weather lookup for %r failed", city)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
