"""
Client OAuth2 Google (code d'autorisation) basé sur httpx.
- authorization_url: URL de consentement (scopes profile + email)
- fetch_profile: échange du code puis lecture de userinfo, profil normalisé
"""
import logging
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import httpx

logger = logging.getLogger(__name__)

AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
TOKEN_URL = "https://oauth2.googleapis.com/token"
USERINFO_URL = "https://www.googleapis.com/oauth2/v3/userinfo"
SCOPES = ("profile", "email")


class GoogleAuthError(Exception):
    """Refus de l'utilisateur ou erreur côté fournisseur."""


class GoogleOAuthClient:
    def __init__(
        self,
        client_id: str,
        client_secret: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        # transport injectable (httpx.MockTransport en tests)
        self._transport = transport
        self._timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self.client_id and self.client_secret)

    def authorization_url(self, redirect_uri: str) -> str:
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": redirect_uri,
            "scope": " ".join(SCOPES),
        }
        return f"{AUTHORIZE_URL}?{urlencode(params)}"

    async def fetch_profile(self, code: str, redirect_uri: str) -> Dict[str, Any]:
        """
        Échange le code contre un access_token puis lit le profil utilisateur.
        Retour: {"id", "displayName", "emails": [{"value", "verified"}]}
        Erreurs: GoogleAuthError pour toute réponse HTTP non 2xx ou réseau.
        """
        payload = {
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": redirect_uri,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                token_resp = await client.post(
                    TOKEN_URL,
                    data=payload,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
                token_resp.raise_for_status()
                access_token = token_resp.json().get("access_token")
                if not access_token:
                    raise GoogleAuthError("access_token absent de la réponse Google")

                info_resp = await client.get(
                    USERINFO_URL,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
                info_resp.raise_for_status()
                userinfo = info_resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("google.oauth error=%s", e)
            raise GoogleAuthError(str(e)) from e
        return normalize_userinfo(userinfo)


def normalize_userinfo(userinfo: Dict[str, Any]) -> Dict[str, Any]:
    # Même forme que le profil "passport" consommé par le front historique
    email = userinfo.get("email")
    emails = [{"value": email, "verified": bool(userinfo.get("email_verified"))}] if email else []
    return {
        "id": userinfo.get("sub"),
        "displayName": userinfo.get("name"),
        "emails": emails,
    }
