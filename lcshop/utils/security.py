import logging
from typing import Any, Dict

from fastapi import Depends, HTTPException, Request

from lcshop.auth.tokens import InvalidSessionToken, verify_token
from lcshop.config import Settings
from lcshop.utils.deps import get_settings

logger = logging.getLogger(__name__)

UNAUTHORIZED = "unauthorized"

def bearer_token(request: Request) -> str | None:
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header[7:].strip() or None
    return None

def get_current_user(request: Request, settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    # Même réponse 401 pour jeton absent, expiré ou invalide
    token = bearer_token(request)
    if not token:
        raise HTTPException(status_code=401, detail=UNAUTHORIZED)
    try:
        claims = verify_token(token, settings.jwt_secret)
    except InvalidSessionToken as e:
        logger.info("auth.guard rejected reason=%s", e)
        raise HTTPException(status_code=401, detail=UNAUTHORIZED)
    request.state.user = claims
    return claims

def require_user(user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
    return user
