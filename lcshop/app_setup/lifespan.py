"""
Lifespan FastAPI: journalise l'état effectif des flux au démarrage.
- Les clients (passerelle iyzico, client Google) sont construits par create_app;
  le lifespan rend seulement visible ce qui est actif.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = logging.getLogger("uvicorn.error")
    settings = app.state.settings
    if app.state.gateway.configured:
        logger.info("Payments enabled")
    if app.state.identity.configured and settings.jwt_secret:
        logger.info("Google login enabled")
    else:
        logger.warning("Google login disabled: GOOGLE_CLIENT_ID/GOOGLE_CLIENT_SECRET/JWT_SECRET missing")
    yield
