import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse
from starlette.status import HTTP_302_FOUND

from lcshop.config import Settings
from lcshop.utils.deps import get_identity, get_settings
from lcshop.utils.security import UNAUTHORIZED
from .google import GoogleAuthError, GoogleOAuthClient
from .service import complete_login

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])

def _require_auth_configured(settings: Settings, identity: GoogleOAuthClient) -> None:
    if not identity.configured or not settings.jwt_secret:
        raise HTTPException(status_code=503, detail="auth_not_configured")

@router.get("/google")
def google_login(
    settings: Settings = Depends(get_settings),
    identity: GoogleOAuthClient = Depends(get_identity),
):
    """
    Démarre la connexion Google: redirection vers l'écran de consentement.
    - Scopes: profile, email
    - Aucun état local conservé
    """
    _require_auth_configured(settings, identity)
    url = identity.authorization_url(settings.google_callback_url)
    return RedirectResponse(url=url, status_code=HTTP_302_FOUND)

@router.get("/google/callback")
async def google_callback(
    code: Optional[str] = None,
    error: Optional[str] = None,
    settings: Settings = Depends(get_settings),
    identity: GoogleOAuthClient = Depends(get_identity),
):
    """
    Retour Google: lit le profil, émet le jeton de session et redirige vers
    <front>/panel.html?token=<jeton>.
    - Refus utilisateur (?error=...), code absent ou erreur fournisseur: 401
    """
    _require_auth_configured(settings, identity)
    if error or not code:
        logger.info("auth.google.callback denied error=%s", error)
        raise HTTPException(status_code=401, detail=UNAUTHORIZED)
    try:
        profile = await identity.fetch_profile(code, settings.google_callback_url)
    except GoogleAuthError:
        raise HTTPException(status_code=401, detail=UNAUTHORIZED)

    redirect_url = complete_login(profile, settings.jwt_secret, settings.frontend_url)
    logger.info("auth.google.callback ok has_email=%s", bool(profile.get("emails")))
    return RedirectResponse(url=redirect_url, status_code=HTTP_302_FOUND)
