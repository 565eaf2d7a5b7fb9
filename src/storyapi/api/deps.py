"""FastAPI dependencies for dependency injection.

Provides the authentication gate and access to the request handler built
at startup.
"""

import logging
from typing import Annotated, Any

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from storyapi.api.exceptions import UnauthorizedError
from storyapi.api.handlers import StoryRequestHandler
from storyapi.core.security import decode_access_token

logger = logging.getLogger(__name__)

# Security scheme
security = HTTPBearer(auto_error=False)


async def require_auth(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> dict[str, Any]:
    """Authentication gate: require a valid bearer access token.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded token claims

    Raises:
        UnauthorizedError: If the token is missing or invalid
    """
    if credentials is None:
        raise UnauthorizedError("Missing authentication token")

    claims = decode_access_token(credentials.credentials)
    if claims is None:
        logger.info("Rejected request with invalid bearer token")
        raise UnauthorizedError("Invalid authentication token")

    return claims


async def authenticate_request(request: Request) -> dict[str, Any]:
    """Run the authentication gate outside dependency resolution.

    FastAPI parses the request body before router dependencies run, so a
    malformed body would otherwise be rejected before the token is checked.

    Raises:
        UnauthorizedError: If the token is missing or invalid
    """
    return await require_auth(await security(request))


def get_story_handler(request: Request) -> StoryRequestHandler:
    """Return the StoryRequestHandler attached to the app at startup.

    Raises:
        RuntimeError: If the application lifespan has not run.
    """
    handler = getattr(request.app.state, "story_handler", None)
    if handler is None:
        raise RuntimeError("Story handler not initialized. Start the app lifespan first.")
    return handler


# Type aliases for dependency injection
AuthClaims = Annotated[dict[str, Any], Depends(require_auth)]
StoryHandler = Annotated[StoryRequestHandler, Depends(get_story_handler)]
