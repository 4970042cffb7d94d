"""
Routes simples (hors routers): texte de vie sur / et favicon vide.
"""
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse, Response
from starlette.status import HTTP_204_NO_CONTENT

ROOT_TEXT = "LC Shop backend OK"

def register_routes(app: FastAPI) -> None:
    """
    Enregistre la route racine (liveness texte) et /favicon.ico.
    - Laisse l'OpenAPI propre (include_in_schema=False).
    """
    @app.get("/", include_in_schema=False, response_class=PlainTextResponse)
    def root():
        return ROOT_TEXT

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=HTTP_204_NO_CONTENT)
