"""
Registre central des routers (auth Google, API iyzico, health).
"""
from fastapi import FastAPI
from lcshop.auth.views import router as auth_router
from lcshop.payments import views as payments_views
from lcshop.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    # Connexion Google (redirections navigateur)
    app.include_router(auth_router)
    # API paiement
    app.include_router(payments_views.router)
    # Health & monitoring
    app.include_router(health_router)
