"""Bearer key guard for the achievement and streak endpoints"""
import hmac
import logging
from typing import Optional
from fastapi import HTTPException, Request, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from eunoia import config

logger = logging.getLogger(__name__)

# Missing credentials are reported by verify_api_key as 401, not by HTTPBearer as 403
bearer_scheme = HTTPBearer(auto_error=False)


def is_known_key(api_key: str) -> bool:
    """Constant-time membership check against config.API_KEYS"""
    return any(hmac.compare_digest(api_key, known) for known in config.API_KEYS)


async def verify_api_key(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme)
) -> str:
    """
    Guard an engine endpoint with the configured API keys

    Returns:
        The accepted key

    Raises:
        HTTPException: 503 when no keys are configured, 401 when the
            bearer token is missing or unknown
    """
    if not config.API_KEYS:
        logger.error(f"{request.method} {request.url.path} refused: API_KEYS is empty")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="API authentication not configured"
        )

    if credentials is None or not is_known_key(credentials.credentials):
        logger.warning(f"{request.method} {request.url.path} refused: missing or unknown API key")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key",
            headers={"WWW-Authenticate": "Bearer"}
        )

    return credentials.credentials
