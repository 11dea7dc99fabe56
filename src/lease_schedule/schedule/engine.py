from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Iterable, Optional

from lease_schedule.inputs.normalize import parse_amount, to_start_date
from lease_schedule.inputs.schema import ScheduleInputs
from lease_schedule.schedule.amounts import (
    calculate_monthly_rental,
    calculate_rental_for_payment,
    calculate_service_charge_for_payment,
    calculate_vat,
    round_money,
)
from lease_schedule.schedule.dates import create_payment_date, format_date
from lease_schedule.schedule.terms import calculate_months_for_payment, get_payment_count, get_total_months

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaymentObject:
    payment_number: int
    due_date: Optional[date]
    formatted_due_date: str
    months_covered: int
    # Monetary fields are each rounded to cents on their own.
    base_rental: float
    service_charge: float
    subtotal: float
    vat_amount: float
    total_amount: float
    currency: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "paymentNumber": self.payment_number,
            "dueDate": self.due_date.isoformat() if self.due_date is not None else None,
            "formattedDueDate": self.formatted_due_date,
            "monthsCovered": self.months_covered,
            "baseRental": self.base_rental,
            "serviceCharge": self.service_charge,
            "subtotal": self.subtotal,
            "vatAmount": self.vat_amount,
            "totalAmount": self.total_amount,
            "currency": self.currency,
        }


@dataclass(frozen=True)
class ScheduleSummary:
    number_of_payments: int
    total_contract_value: float  # parsed annual rent, not a sum over payments
    total_service_charges: float
    total_vat_amount: float
    grand_total: float
    security_deposit: float
    payments: tuple[PaymentObject, ...]
    payment_frequency: str
    contract_duration: str
    vat_percentage: float

    def to_dict(self, include_payments: bool = True) -> dict[str, Any]:
        out: dict[str, Any] = {
            "numberOfPayments": self.number_of_payments,
            "totalContractValue": self.total_contract_value,
            "totalServiceCharges": self.total_service_charges,
            "totalVATAmount": self.total_vat_amount,
            "grandTotal": self.grand_total,
            "securityDeposit": self.security_deposit,
            "paymentFrequency": self.payment_frequency,
            "contractDuration": self.contract_duration,
            "vatPercentage": self.vat_percentage,
        }
        if include_payments:
            out["payments"] = [p.to_dict() for p in self.payments]
        return out


def _running_total(values: Iterable[float]) -> float:
    # Uncompensated left-to-right float addition.
    total = 0.0
    for v in values:
        total += v
    return total


def build_single_payment(
    payment_number: int,
    start_date: Optional[date],
    inputs: ScheduleInputs,
    total_months: int,
) -> PaymentObject:
    months_covered = calculate_months_for_payment(payment_number, total_months, inputs.payment_frequency)

    monthly_rental = calculate_monthly_rental(parse_amount(inputs.rental_amount))
    rental = calculate_rental_for_payment(monthly_rental, months_covered)
    service_charge = calculate_service_charge_for_payment(parse_amount(inputs.service_charge), months_covered)

    # VAT is charged on this payment's own subtotal.
    subtotal = rental + service_charge
    vat_amount = calculate_vat(subtotal, parse_amount(inputs.vat_percentage))
    total_amount = subtotal + vat_amount

    due_date = create_payment_date(start_date, payment_number, inputs.payment_frequency)

    return PaymentObject(
        payment_number=payment_number,
        due_date=due_date,
        formatted_due_date=format_date(due_date),
        months_covered=months_covered,
        base_rental=round_money(rental),
        service_charge=round_money(service_charge),
        subtotal=round_money(subtotal),
        vat_amount=round_money(vat_amount),
        total_amount=round_money(total_amount),
        currency=inputs.currency,
    )


def build_payment_schedule(inputs: ScheduleInputs) -> ScheduleSummary:
    """
    Build the full invoice schedule for a lease contract.

    Never raises on bad input: unparseable amounts count as 0, an unknown
    frequency as monthly and an unreadable duration as one year. Totals are
    sums of the already-rounded per-payment figures, rounded again to cents.
    """
    total_months = get_total_months(inputs.duration)
    payment_count = get_payment_count(total_months, inputs.payment_frequency)
    start_date = to_start_date(inputs.start_date)

    payments = tuple(
        build_single_payment(i, start_date, inputs, total_months) for i in range(1, payment_count + 1)
    )

    frequency = inputs.payment_frequency
    if isinstance(frequency, Enum):
        frequency = frequency.value

    logger.debug(
        "Built schedule: %s payments over %s months (frequency=%r, start=%s)",
        payment_count,
        total_months,
        frequency,
        start_date,
    )

    return ScheduleSummary(
        number_of_payments=payment_count,
        total_contract_value=parse_amount(inputs.rental_amount),
        total_service_charges=round_money(_running_total(p.service_charge for p in payments)),
        total_vat_amount=round_money(_running_total(p.vat_amount for p in payments)),
        grand_total=round_money(_running_total(p.total_amount for p in payments)),
        security_deposit=parse_amount(inputs.security_deposit),
        payments=payments,
        payment_frequency=frequency,
        contract_duration=inputs.duration,
        vat_percentage=parse_amount(inputs.vat_percentage),
    )
