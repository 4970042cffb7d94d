"""
Dépendances FastAPI donnant accès aux objets construits au démarrage
(create_app les dépose sur app.state).
"""
from fastapi import Request

from lcshop.config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_gateway(request: Request):
    return request.app.state.gateway

def get_identity(request: Request):
    return request.app.state.identity
