"""FastAPI dependencies — service wiring and the bearer-token auth gate.

Services are built per request from their collaborators; tests swap any of
these through ``app.dependency_overrides``.
"""
import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterator, Optional

import httpx
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.errors import AuthenticationRequired
from app.providers.weatherstack import WeatherstackClient
from app.repositories.user_repository import SqlUserRepository
from app.repositories.weather_repository import SqlWeatherRepository
from app.services.auth_service import AuthService
from app.services.token_service import TokenService
from app.services.weather_service import WeatherService

logger = logging.getLogger(__name__)

# auto_error=False so the gate, not FastAPI, decides the 401 body
bearer_scheme = HTTPBearer(auto_error=False, description="Token from /api/auth/register or /api/auth/login")


@dataclass(frozen=True)
class AuthenticatedUser:
    user_id: str


def get_token_service() -> TokenService:
    return TokenService(
        secret=settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expires_in=timedelta(hours=settings.JWT_EXPIRES_HOURS),
    )


def get_weather_provider() -> Iterator[WeatherstackClient]:
    client = WeatherstackClient(
        api_key=settings.WEATHERSTACK_API_KEY,
        base_url=settings.WEATHERSTACK_URL,
        client=httpx.Client(),
    )
    try:
        yield client
    finally:
        client.close()


def get_auth_service(
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(SqlUserRepository(db), tokens, bcrypt_rounds=settings.BCRYPT_ROUNDS)


def get_weather_service(
    db: Session = Depends(get_db),
    provider: WeatherstackClient = Depends(get_weather_provider),
) -> WeatherService:
    return WeatherService(SqlWeatherRepository(db), provider)


def require_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> AuthenticatedUser:
    """Auth gate: resolve ``Authorization: Bearer <token>`` or reject with 401.

    The resolved identity is stored on ``request.state.user`` so handlers
    behind the gate can read it without depending on this function.
    """
    if credentials is None or not credentials.credentials.strip():
        raise AuthenticationRequired()

    user = AuthenticatedUser(user_id=tokens.verify(credentials.credentials.strip()))
    request.state.user = user
    logger.debug("Authenticated request from user %s", user.user_id)
    return user
