import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import RedirectResponse
from starlette.concurrency import run_in_threadpool
from starlette.status import HTTP_303_SEE_OTHER

from lcshop.config import Settings
from lcshop.utils.deps import get_gateway, get_settings
from lcshop.utils.security import require_user
from . import checkout
from . import service as payments_service
from .iyzico_client import PaymentsNotConfigured

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/iyzico", tags=["Payments API"])


async def _plan_selector(request: Request) -> Optional[str]:
    """
    Lit le sélecteur de plan du corps JSON sans validation stricte.
    - Corps vide, non-objet ou plan non textuel: None (plan par défaut)
    - JSON illisible: 400 invalid_json
    """
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="invalid_json")
    plan = body.get("plan") if isinstance(body, dict) else None
    return plan if isinstance(plan, str) else None

# module lcshop.payments.views
@router.post("/checkout-init")
async def checkout_init(
    request: Request,
    user: Dict[str, Any] = Depends(require_user),
    settings: Settings = Depends(get_settings),
    gateway=Depends(get_gateway),
):
    """
    Initialise le formulaire de paiement iyzico pour l'utilisateur authentifié.
    - Entrée JSON optionnelle: { "plan": "week" | "month" | "quarter" }
    - Sécurité: require_user (Bearer), vérifié avant la lecture du corps
    - Réponses: {checkoutFormContent} | 503 iyzico_not_configured | 400 {error}
    """
    plan_selector = await _plan_selector(request)
    try:
        # appel SDK bloquant
        content = await run_in_threadpool(
            payments_service.start_checkout,
            gateway,
            plan_selector=plan_selector,
            claims=user,
            ip=checkout.client_ip(request),
            callback_url=settings.iyzico_callback_url,
        )
    except PaymentsNotConfigured:
        raise HTTPException(status_code=503, detail="iyzico_not_configured")
    except payments_service.CheckoutRejected as e:
        raise HTTPException(status_code=400, detail=e.message)
    return {"checkoutFormContent": content}

@router.post("/callback", include_in_schema=False)
def iyzico_callback(
    token: Optional[str] = Form(None),
    settings: Settings = Depends(get_settings),
    gateway=Depends(get_gateway),
):
    """
    Callback iyzico (form-encoded, champ token): redirige le navigateur
    vers success.html ou fail.html selon le résultat relu chez iyzico.
    """
    target = settings.success_url if payments_service.resolve_callback(gateway, token) else settings.fail_url
    return RedirectResponse(url=target, status_code=HTTP_303_SEE_OTHER)
