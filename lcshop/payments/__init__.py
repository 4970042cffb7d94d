"""
Module 'payments' (feature-first): point d'entrée public.
Réunit catalogue des plans, construction du payload, client iyzico et services.
"""

from .plans import PLAN_PRICES, DEFAULT_PLAN, CURRENCY, resolve_plan
from .checkout import build_checkout_request, client_ip
from .iyzico_client import (
    IyzicoGateway,
    UnconfiguredGateway,
    IyzicoError,
    PaymentsNotConfigured,
    build_gateway,
)
from .service import CheckoutRejected, start_checkout, payment_succeeded, resolve_callback

__all__ = [
    # plans
    "PLAN_PRICES",
    "DEFAULT_PLAN",
    "CURRENCY",
    "resolve_plan",
    # checkout
    "build_checkout_request",
    "client_ip",
    # iyzico
    "IyzicoGateway",
    "UnconfiguredGateway",
    "IyzicoError",
    "PaymentsNotConfigured",
    "build_gateway",
    # services
    "CheckoutRejected",
    "start_checkout",
    "payment_succeeded",
    "resolve_callback",
]
