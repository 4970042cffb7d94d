"""
Catalogue des plans "boost" (logique pure, pas d'iyzico).
Les prix restent des chaînes décimales à virgule fixe (jamais des float).
"""
from typing import Dict, Optional, Tuple

CURRENCY = "TRY"
DEFAULT_PLAN = "month"

PLAN_PRICES: Dict[str, str] = {
    "week": "99.00",
    "month": "139.00",
    "quarter": "269.00",
}

# module lcshop.payments.plans
def resolve_plan(selector: Optional[str]) -> Tuple[str, str]:
    """
    Retourne (plan, prix) pour un sélecteur de plan.
    - Sélecteur absent, vide ou inconnu: plan par défaut (month) et son prix.
    """
    plan = selector or DEFAULT_PLAN
    if not isinstance(plan, str) or plan not in PLAN_PRICES:
        plan = DEFAULT_PLAN
    return plan, PLAN_PRICES[plan]
