from fastapi import Security, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
import logging
import secrets
from content_validator.core.config import settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def verify_api_key(credentials: HTTPAuthorizationCredentials = Security(bearer_scheme)):
    """
    Verify Bearer token from Authorization header.

    Guards the review endpoints (import, override, export). Can be disabled by
    setting REQUIRE_API_KEY=false in the environment.

    Raises:
        HTTPException: 401 if Bearer token is missing, 403 if invalid, 500 if misconfigured
    """
    if not settings.REQUIRE_API_KEY:
        return True

    if not settings.API_KEY:
        logger.warning("Bearer token not configured but REQUIRE_API_KEY is True. Denying access.")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="API authentication is not properly configured"
        )

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Bearer token is required. Provide Authorization: Bearer <token> header.",
            headers={"WWW-Authenticate": "Bearer"}
        )

    if not secrets.compare_digest(credentials.credentials, settings.API_KEY):
        logger.warning("Invalid bearer token attempt on review API")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid bearer token",
            headers={"WWW-Authenticate": "Bearer"}
        )

    return True
