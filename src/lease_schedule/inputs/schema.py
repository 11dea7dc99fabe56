from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date, datetime
from enum import Enum
from typing import Any, Union


class PaymentFrequency(str, Enum):
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    SEMI_ANNUALLY = "Semi-annually"
    ANNUALLY = "Annually"


# Wire name (camelCase) for each ScheduleInputs attribute.
_WIRE_NAMES = {
    "rental_amount": "rentalAmount",
    "service_charge": "serviceCharge",
    "vat_percentage": "vatPercentage",
    "security_deposit": "securityDeposit",
    "payment_frequency": "paymentFrequency",
    "duration": "duration",
    "start_date": "startDate",
    "currency": "currency",
}


@dataclass(frozen=True)
class ScheduleInputs:
    # Amounts are annual, as typed into the contract form (e.g. "12,000.00").
    rental_amount: str = ""
    service_charge: str = ""
    vat_percentage: str = ""
    security_deposit: str = ""
    payment_frequency: Union[PaymentFrequency, str] = PaymentFrequency.MONTHLY
    duration: str = ""  # e.g. "1 year 2 months"
    start_date: Union[date, datetime, str, None] = None
    currency: str = ""

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> ScheduleInputs:
        """
        Build inputs from a camelCase mapping (the form / request payload shape).
        Missing keys become empty strings; the engine applies its own defaults.
        """
        kwargs: dict[str, Any] = {}
        for attr, wire in _WIRE_NAMES.items():
            value = d.get(wire, d.get(attr))
            if attr == "start_date":
                kwargs[attr] = value if value not in ("", None) else None
            else:
                kwargs[attr] = "" if value is None else value
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, (date, datetime)):
                value = value.isoformat()
            out[_WIRE_NAMES[f.name]] = value
        return out
