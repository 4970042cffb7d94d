"""
Middlewares transverses de l'application.
- register_basic_middlewares: CORS (front Netlify sur un autre domaine).
- register_security_middleware: en-têtes de sécurité par défaut.
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from lcshop.config import Settings

def register_basic_middlewares(app: FastAPI, settings: Settings) -> None:
    """
    Ajoute CORSMiddleware avec les origines configurées (CORS_ORIGINS, "*" par défaut).
    Le jeton voyage dans l'en-tête Authorization, pas en cookie: pas de credentials.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

def register_security_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)

        # En-têtes de sécurité
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        response.headers.setdefault("Permissions-Policy", "geolocation=(), microphone=(), camera=()")
        return response
