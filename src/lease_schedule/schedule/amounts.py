from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

MONEY_PLACES = Decimal("0.01")

# Wide enough to quantize any finite double to cents.
_MONEY_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def round_money(x: float) -> float:
    # Round the exact binary value half-up to cents, as Number.toFixed(2) does.
    x = float(x)
    if not math.isfinite(x):
        return 0.0
    return float(Decimal(x).quantize(MONEY_PLACES, context=_MONEY_CONTEXT))


def calculate_monthly_rental(annual_rental: float) -> float:
    return annual_rental / 12.0


def calculate_monthly_service_charge(annual_service_charge: float) -> float:
    return annual_service_charge / 12.0


def calculate_rental_for_payment(monthly_rate: float, months_covered: int) -> float:
    return monthly_rate * months_covered


def calculate_service_charge_for_payment(annual_service_charge: float, months_covered: int) -> float:
    # 2,400 annual -> 200/month -> 600 for a quarterly payment
    return calculate_monthly_service_charge(annual_service_charge) * months_covered


def calculate_vat(amount: float, vat_percent: float) -> float:
    return amount * (vat_percent / 100.0)
