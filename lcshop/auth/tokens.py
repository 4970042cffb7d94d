"""
Jetons de session (JWT HS256) émis après la connexion Google.
- Durée de validité fixe: 7 jours, pas de refresh ni de révocation.
- verify_token ne renvoie que les claims d'identité (email, name, ...).
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

SESSION_TTL = timedelta(days=7)
ALGORITHM = "HS256"
_REGISTERED_CLAIMS = ("iat", "exp", "nbf")


class InvalidSessionToken(Exception):
    """Jeton absent, mal formé, mal signé ou expiré."""


def issue_token(
    claims: Dict[str, Any],
    secret: str,
    ttl: timedelta = SESSION_TTL,
    now: Optional[datetime] = None,
) -> str:
    if not secret:
        raise InvalidSessionToken("JWT secret manquant")
    issued_at = now or datetime.now(timezone.utc)
    payload = dict(claims)
    payload["iat"] = issued_at
    payload["exp"] = issued_at + ttl
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def verify_token(token: str, secret: str) -> Dict[str, Any]:
    """
    Vérifie signature + expiration et retourne les claims d'identité.
    - Lève InvalidSessionToken pour toute erreur (le garde la traduit en 401).
    - Aucune tolérance (leeway=0): la frontière exacte de l'expiration est celle de PyJWT.
    """
    if not token or not secret:
        raise InvalidSessionToken("Jeton ou secret manquant")
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM], options={"require": ["exp"]})
    except jwt.PyJWTError as e:
        raise InvalidSessionToken(str(e)) from e
    return {k: v for k, v in payload.items() if k not in _REGISTERED_CLAIMS}
