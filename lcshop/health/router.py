from fastapi import APIRouter, Depends

from lcshop.config import Settings
from lcshop.utils.deps import get_settings

router = APIRouter(prefix="/health", tags=["Health"])

@router.get("")
def health_root():
    return {"ok": True}

@router.get("/config")
def health_config(settings: Settings = Depends(get_settings)):
    # Indique quels flux sont actifs, sans exposer de secret
    return {
        "payments": settings.payments_configured,
        "google": settings.google_configured,
        "jwt": bool(settings.jwt_secret),
    }
