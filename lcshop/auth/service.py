from typing import Any, Dict
from urllib.parse import quote

from .tokens import issue_token

DEFAULT_DISPLAY_NAME = "LC Üye"

# --- Cas d'usage Auth exposés ---

def claims_from_profile(profile: Dict[str, Any] | None) -> Dict[str, str]:
    """Extrait les claims de session d'un profil fournisseur:
    - email: première adresse du profil, sinon ""
    - name: displayName, sinon partie locale de l'email, sinon DEFAULT_DISPLAY_NAME
    """
    profile = profile or {}
    emails = profile.get("emails") or []
    first = emails[0] if emails else {}
    email = (first.get("value") if isinstance(first, dict) else None) or ""
    name = profile.get("displayName") or (email.split("@")[0] if email else DEFAULT_DISPLAY_NAME)
    return {"email": email, "name": name}

def complete_login(profile: Dict[str, Any] | None, secret: str, frontend_url: str) -> str:
    """Fin de connexion:
    - Seul endroit où un jeton de session est émis
    - Retourne l'URL du panel front avec le jeton en query (?token=...)
    """
    token = issue_token(claims_from_profile(profile), secret)
    return f"{frontend_url}/panel.html?token={quote(token, safe='')}"
