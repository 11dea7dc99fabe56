from __future__ import annotations

from http import HTTPStatus
from typing import Any

from lease_schedule.inputs.schema import ScheduleInputs
from lease_schedule.schedule.engine import build_payment_schedule

SCHEDULE_ENDPOINT = "/api/payment-schedule"


def handle_schedule_request(body: Any) -> tuple[HTTPStatus, dict[str, Any]]:
    """Validate a preview request body and compute its schedule."""
    if not isinstance(body, dict):
        return HTTPStatus.BAD_REQUEST, {"error": "Expected JSON object body"}
    inputs = body.get("inputs")
    if not isinstance(inputs, dict):
        return HTTPStatus.BAD_REQUEST, {"error": "Body must include inputs object"}

    summary = build_payment_schedule(ScheduleInputs.from_dict(inputs))
    return HTTPStatus.OK, summary.to_dict()
