from __future__ import annotations

from fastapi import Header, HTTPException, status

from app.core.config import settings


def check_api_key(x_api_key: str | None) -> None:
    if settings.explain_auth_mode != "protected" or not settings.api_key:
        return
    if x_api_key != settings.api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Please provide a valid API key.",
        )


def require_api_key(x_api_key: str | None = Header(default=None, alias="X-API-Key")) -> None:
    check_api_key(x_api_key)


def require_configured_api_key(x_api_key: str | None = Header(default=None, alias="X-API-Key")) -> None:
    # Stored runs carry resume text, so reads need the key whenever one is set.
    if settings.api_key and x_api_key != settings.api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Please provide a valid API key.",
        )
