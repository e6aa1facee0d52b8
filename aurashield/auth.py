"""
auth.py — API Key Authentication
================================

Provides the dependency that guards POST /analyze. Two header styles are
accepted, checked in this order:

    Authorization: Bearer <key>
    x-api-key: <key>

Valid keys come from Config.API_KEYS (comma-separated API_KEYS env var),
read at request time.

Responses:
    - 401 UNAUTHORIZED if no key was supplied
    - 403 FORBIDDEN if the key is not in the configured set
"""

import logging
from typing import Optional

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from aurashield.config import Config

logger = logging.getLogger(__name__)

API_KEY_NAME = "x-api-key"
BEARER_PREFIX = "Bearer "

# Extract raw header values, never auto-reject
api_key_header = APIKeyHeader(name=API_KEY_NAME, auto_error=False)
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


def extract_api_key(authorization: Optional[str], x_api_key: Optional[str]) -> Optional[str]:
    """Bearer token wins over x-api-key. Blank values count as missing."""
    if authorization and authorization.startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX):].strip()
        if token:
            return token
    if x_api_key and x_api_key.strip():
        return x_api_key.strip()
    return None


async def verify_api_key(
    authorization: Optional[str] = Security(authorization_header),
    x_api_key: Optional[str] = Security(api_key_header),
) -> str:
    """Validate the caller's API key against Config.API_KEYS.

    Returns:
        The validated API key string.

    Raises:
        HTTPException(401): If no key was supplied.
        HTTPException(403): If the key is not recognised.
    """
    api_key = extract_api_key(authorization, x_api_key)

    if api_key is None:
        logger.warning("[AUTH] Missing API key")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "error": "UNAUTHORIZED",
                "message": "Missing API key. Use Authorization: Bearer <key> or x-api-key: <key>",
            },
        )

    if api_key not in Config.API_KEYS:
        logger.warning("[AUTH] Invalid API key attempted")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={"error": "FORBIDDEN", "message": "Invalid API key"},
        )

    return api_key
