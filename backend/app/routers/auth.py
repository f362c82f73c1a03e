"""Registration and login routes."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies import get_auth_service
from app.errors import WeatherAppError
from app.schemas.auth import Credentials, TokenOut
from app.services.auth_service import AuthService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/register", response_model=TokenOut, status_code=status.HTTP_201_CREATED)
def register(payload: Optional[Credentials] = None, service: AuthService = Depends(get_auth_service)):
    """Create an account and return a bearer token for it."""
    try:
        token = service.register(*_credentials(payload))
    except WeatherAppError:
        raise
    except Exception as exc:
        logger.exception("Registration failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return TokenOut(token=token)


@router.post("/login", response_model=TokenOut)
def login(payload: Optional[Credentials] = None, service: AuthService = Depends(get_auth_service)):
    """Exchange a username and password for a bearer token."""
    try:
        token = service.login(*_credentials(payload))
    except WeatherAppError:
        raise
    except Exception as exc:
        logger.exception("Login failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return TokenOut(token=token)


def _credentials(payload: Optional[Credentials]) -> tuple[Optional[str], Optional[str]]:
    if payload is None:
        return None, None
    return payload.username, payload.password
