# module lcshop.app
from typing import Optional

from fastapi import FastAPI

from lcshop.config import Settings
from lcshop.auth.google import GoogleOAuthClient
from lcshop.payments.iyzico_client import build_gateway
from lcshop.app_setup.middlewares import register_basic_middlewares, register_security_middleware
from lcshop.app_setup.exceptions import register_exception_handlers
from lcshop.app_setup.routes import register_routes
from lcshop.app_setup.routers import register_routers
from lcshop.app_setup.lifespan import lifespan

def create_app(
    settings: Optional[Settings] = None,
    *,
    gateway=None,
    identity: Optional[GoogleOAuthClient] = None,
) -> FastAPI:
    """
    Crée et configure l'instance FastAPI de l'application.
    Étapes et ordre:
      1) Settings lu une seule fois (ou injecté, ex: tests) puis déposé sur app.state
      2) Passerelle iyzico (configurée ou non) et client Google construits une fois
      3) register_basic_middlewares: CORS
      4) register_security_middleware: en-têtes de sécurité
      5) register_exception_handlers: erreurs HTTP -> {"error": ...}
      6) register_routes: / et favicon
      7) register_routers: auth Google, API iyzico, health
    Retourne:
      - FastAPI: l'application prête à être servie (ASGI).
    """
    settings = settings or Settings.from_env()

    app = FastAPI(title="LC Shop API", lifespan=lifespan)
    app.state.settings = settings
    app.state.gateway = gateway if gateway is not None else build_gateway(settings)
    app.state.identity = identity or GoogleOAuthClient(settings.google_client_id, settings.google_client_secret)

    register_basic_middlewares(app, settings)
    register_security_middleware(app)
    register_exception_handlers(app)
    register_routes(app)
    register_routers(app)
    return app

# App globale
app = create_app()
