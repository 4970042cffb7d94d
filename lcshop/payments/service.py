"""
Cas d'usage 'payments': orchestre plans, checkout et client iyzico.
"""
import logging
from typing import Any, Dict, Optional

from . import checkout
from .iyzico_client import IyzicoError, PaymentsNotConfigured
from .plans import resolve_plan

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER_ERROR = "iyzico_error"


class CheckoutRejected(Exception):
    """iyzico a refusé l'initialisation (ou erreur SDK)."""

    def __init__(self, message: str = DEFAULT_PROVIDER_ERROR):
        super().__init__(message)
        self.message = message


def start_checkout(
    gateway,
    *,
    plan_selector: Optional[str],
    claims: Dict[str, Any],
    ip: str,
    callback_url: str,
) -> str:
    """
    Initialise un formulaire de paiement hébergé pour le plan demandé.
    - PaymentsNotConfigured si la passerelle n'a pas été configurée (vérifié avant tout)
    - CheckoutRejected(message iyzico ou "iyzico_error") si status != "success"
    Retour: checkoutFormContent à rendre côté front.
    """
    if not gateway.configured:
        raise PaymentsNotConfigured()

    plan, price = resolve_plan(plan_selector)
    request = checkout.build_checkout_request(
        plan=plan,
        price=price,
        claims=claims,
        ip=ip,
        callback_url=callback_url,
    )
    try:
        result = gateway.initialize_checkout_form(request)
    except IyzicoError:
        raise CheckoutRejected()

    if (result or {}).get("status") != "success":
        message = (result or {}).get("errorMessage") or DEFAULT_PROVIDER_ERROR
        logger.info("payments.checkout rejected plan=%s error=%s", plan, message)
        raise CheckoutRejected(message)

    logger.info("payments.checkout ok plan=%s conversation=%s", plan, request["conversationId"])
    return result.get("checkoutFormContent")

def payment_succeeded(result: Dict[str, Any] | None) -> bool:
    # Deux champs: statut de la requête ET statut du paiement
    result = result or {}
    payment_status = str(result.get("paymentStatus") or "")
    return result.get("status") == "success" and payment_status.upper() == "SUCCESS"

def resolve_callback(gateway, token: Optional[str]) -> bool:
    """
    Détermine l'issue du paiement à partir du token renvoyé par iyzico.
    - Passerelle non configurée ou token absent: échec sans interroger iyzico
    - Sinon relit le formulaire et applique payment_succeeded
    Aucun enregistrement: des callbacks répétés relancent simplement la requête.
    """
    if not gateway.configured or not token:
        return False
    try:
        result = gateway.retrieve_checkout_form(token)
    except (IyzicoError, PaymentsNotConfigured):
        return False
    ok = payment_succeeded(result)
    logger.info("payments.callback ok=%s status=%s payment_status=%s", ok, result.get("status"), result.get("paymentStatus"))
    return ok
