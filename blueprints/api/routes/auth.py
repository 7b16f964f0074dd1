"""Auth Routes — credential login issuing RS256 bearer tokens.

Invariants:
    - POST /auth/login: 200 TokenResponse on valid credentials,
      401 {"error": "invalid_credentials"} otherwise
    - No route here requires a token
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from blueprints.api.dependencies import get_token_service
from blueprints.infrastructure.security import TokenService
from blueprints.schemas.auth import LoginRequest, TokenResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest, tokens: TokenService = Depends(get_token_service),
):
    issued = tokens.login(body.username, body.password)
    if issued is None:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": "invalid_credentials"},
        )
    logger.info("Token issued", extra={"username": body.username})
    return TokenResponse(
        access_token=issued.access_token,
        token_type=issued.token_type,
        expires_in=issued.expires_in,
    )
