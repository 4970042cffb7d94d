# lcshop.config
"""
Configuration centrale du backend.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Construit une seule fois un objet Settings immuable au démarrage du process
- Normalise les secrets/URLs (JWT, Google, iyzico, front Netlify)
- Settings est ensuite passé explicitement aux composants (app.state.settings)
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

def _clean_url(v: str) -> str:
    return _clean_env(v).rstrip("/")

def _split_list(v: str) -> List[str]:
    return [x.strip() for x in (v or "").split(",") if x.strip()]


@dataclass(frozen=True)
class Settings:
    # Front statique (Netlify): pages panel.html / success.html / fail.html
    frontend_url: str = "http://localhost:8888"
    # Secret de signature des jetons de session
    jwt_secret: str = ""
    # iyzico: les trois valeurs sont requises pour activer le checkout
    iyzico_api_key: str = ""
    iyzico_secret_key: str = ""
    iyzico_uri: str = ""
    # URL publique du backend (callbackUrl iyzico, redirect_uri Google)
    public_base_url: str = "http://localhost:3000"
    google_client_id: str = ""
    google_client_secret: str = ""
    port: int = 3000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "info"

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """
        Lit l'environnement (et .env si présent) et retourne un Settings figé.
        - Aucune valeur manquante ne fait échouer le démarrage:
          les endpoints concernés se désactivent (503) à la place.
        """
        if load_env_file:
            load_dotenv(dotenv_path=ENV_PATH, override=False)

        frontend = os.getenv("NETLIFY_SITE_URL") or os.getenv("FRONTEND_URL") or cls.frontend_url
        port_raw = _clean_env(os.getenv("PORT") or "")
        return cls(
            frontend_url=_clean_url(frontend),
            jwt_secret=_clean_env(os.getenv("JWT_SECRET") or ""),
            iyzico_api_key=_clean_env(os.getenv("IYZICO_API_KEY") or ""),
            iyzico_secret_key=_clean_env(os.getenv("IYZICO_SECRET_KEY") or ""),
            iyzico_uri=_clean_url(os.getenv("IYZICO_URI") or ""),
            public_base_url=_clean_url(os.getenv("PUBLIC_BASE_URL") or cls.public_base_url),
            google_client_id=_clean_env(os.getenv("GOOGLE_CLIENT_ID") or ""),
            google_client_secret=_clean_env(os.getenv("GOOGLE_CLIENT_SECRET") or ""),
            port=int(port_raw) if port_raw.isdigit() else cls.port,
            cors_origins=_split_list(os.getenv("CORS_ORIGINS") or "") or ["*"],
            log_level=_clean_env(os.getenv("LOG_LEVEL") or "info").lower(),
        )

    @property
    def payments_configured(self) -> bool:
        return bool(self.iyzico_api_key and self.iyzico_secret_key and self.iyzico_uri)

    @property
    def google_configured(self) -> bool:
        return bool(self.google_client_id and self.google_client_secret)

    # URLs dérivées utilisées par les flux auth/paiement
    @property
    def google_callback_url(self) -> str:
        return f"{self.public_base_url}/auth/google/callback"

    @property
    def iyzico_callback_url(self) -> str:
        return f"{self.public_base_url}/api/iyzico/callback"

    @property
    def success_url(self) -> str:
        return f"{self.frontend_url}/success.html"

    @property
    def fail_url(self) -> str:
        return f"{self.frontend_url}/fail.html"
