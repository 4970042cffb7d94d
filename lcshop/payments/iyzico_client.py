"""
Adaptateur iyzico: centralise les appels et la configuration du SDK iyzipay.
- IyzicoGateway: clés présentes au démarrage, appels réels au SDK
- UnconfiguredGateway: clés absentes, toute tentative d'appel échoue immédiatement
"""
import json
import logging
from typing import Any, Dict
from urllib.parse import urlparse

import iyzipay

from lcshop.config import Settings

logger = logging.getLogger(__name__)

LOCALE = "tr"


class PaymentsNotConfigured(Exception):
    """Clés iyzico absentes au démarrage."""


class IyzicoError(Exception):
    """Erreur SDK/réseau ou réponse iyzico illisible."""


class UnconfiguredGateway:
    configured = False

    def initialize_checkout_form(self, request: Dict[str, Any]) -> Dict[str, Any]:
        raise PaymentsNotConfigured()

    def retrieve_checkout_form(self, token: str) -> Dict[str, Any]:
        raise PaymentsNotConfigured()


class IyzicoGateway:
    configured = True

    def __init__(self, api_key: str, secret_key: str, uri: str):
        self.options = {
            "api_key": api_key,
            "secret_key": secret_key,
            # le SDK attend l'hôte seul (ex: sandbox-api.iyzipay.com)
            "base_url": urlparse(uri).netloc or uri,
        }

    def initialize_checkout_form(self, request: Dict[str, Any]) -> Dict[str, Any]:
        """
        Demande un formulaire de paiement hébergé (CheckoutFormInitialize).
        Retour: dict iyzico (status, checkoutFormContent, token, errorMessage, ...)
        """
        return self._call(iyzipay.CheckoutFormInitialize().create, request)

    def retrieve_checkout_form(self, token: str) -> Dict[str, Any]:
        """
        Relit le résultat définitif d'un formulaire à partir du token du callback.
        Retour: dict iyzico incluant "status" et "paymentStatus".
        """
        return self._call(iyzipay.CheckoutForm().retrieve, {"locale": LOCALE, "token": token})

    def _call(self, sdk_method, request: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = sdk_method(request, self.options)
            raw = response.read()
            body = json.loads(raw.decode("utf-8") if isinstance(raw, bytes) else raw)
        except Exception as e:
            logger.exception("Erreur appel iyzico")
            raise IyzicoError(str(e)) from e
        if not isinstance(body, dict):
            raise IyzicoError("Réponse iyzico inattendue")
        return body


def build_gateway(settings: Settings):
    """
    Choisit la variante une seule fois au démarrage.
    En l'absence de clés, le démarrage continue et les endpoints répondent 503.
    """
    if settings.payments_configured:
        return IyzicoGateway(settings.iyzico_api_key, settings.iyzico_secret_key, settings.iyzico_uri)
    logger.warning("IYZICO env missing: checkout endpoints disabled until set.")
    return UnconfiguredGateway()
