"""Pydantic schemas for registration and login."""
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel


class Credentials(BaseModel):
    # Optional so that missing fields reach the service and produce a 400 {error}
    username: Optional[str] = None
    password: Optional[str] = None


class TokenOut(BaseModel):
    token: str
