"""
Construction de la requête CheckoutFormInitialize (logique pure, pas d'appel iyzico).
"""
import time
from typing import Any, Dict, Optional

from fastapi import Request

from .plans import CURRENCY

# Identité acheteur fictive: juridiction unique, pas de collecte de données légales réelles
PLACEHOLDER_IDENTITY_NUMBER = "11111111111"
PLACEHOLDER_CITY = "Istanbul"
PLACEHOLDER_COUNTRY = "Turkey"
BASKET_ITEM_TYPE_VIRTUAL = "VIRTUAL"

# module lcshop.payments.checkout
def client_ip(request: Request) -> str:
    """
    IP de l'acheteur transmise à iyzico.
    - Priorité au premier élément de X-Forwarded-For (proxy Render/Netlify)
    - Sinon l'adresse du socket
    """
    forwarded = request.headers.get("x-forwarded-for") or ""
    first = forwarded.split(",")[0].strip()
    if first:
        return first
    return request.client.host if request.client else ""

def _address(contact_name: str) -> Dict[str, str]:
    return {
        "contactName": contact_name,
        "city": PLACEHOLDER_CITY,
        "country": PLACEHOLDER_COUNTRY,
        "address": "Digital Delivery",
    }

def build_checkout_request(
    *,
    plan: str,
    price: str,
    claims: Dict[str, Any],
    ip: str,
    callback_url: str,
    now_ms: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Assemble le payload iyzico pour un plan.
    - Identifiants (conversation, panier, acheteur) dérivés de l'horodatage en ms
    - Acheteur: email/nom issus des claims de session, reste en valeurs fixes
    - Un seul article de panier nommé d'après le plan, prix décimal en chaîne
    """
    stamp = str(now_ms if now_ms is not None else int(time.time() * 1000))
    name = claims.get("name") or ""
    contact_name = name or "LC User"
    return {
        "locale": "tr",
        "conversationId": "LC-" + stamp,
        "price": price,
        "paidPrice": price,
        "currency": CURRENCY,
        "basketId": "B" + stamp,
        "paymentGroup": "PRODUCT",
        "callbackUrl": callback_url,
        "buyer": {
            "id": "U" + stamp,
            "name": name or "LC",
            "surname": "User",
            "email": claims.get("email") or "user@example.com",
            "identityNumber": PLACEHOLDER_IDENTITY_NUMBER,
            "registrationAddress": "Digital",
            "ip": ip,
            "city": PLACEHOLDER_CITY,
            "country": PLACEHOLDER_COUNTRY,
        },
        "shippingAddress": _address(contact_name),
        "billingAddress": _address(contact_name),
        "basketItems": [
            {
                "id": "P-" + plan,
                "name": f"Discord Boost - {plan}",
                "category1": "Digital",
                "itemType": BASKET_ITEM_TYPE_VIRTUAL,
                "price": price,
            }
        ],
    }
