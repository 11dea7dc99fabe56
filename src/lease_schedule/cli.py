from __future__ import annotations

import argparse
import json
import logging
import os
from typing import Any

import pandas as pd

from lease_schedule.contracts.request import ContractRequestError, build_create_contract_request
from lease_schedule.export import build_schedules_frame, schedule_to_frame
from lease_schedule.inputs.schema import PaymentFrequency, ScheduleInputs
from lease_schedule.schedule.engine import build_payment_schedule

logger = logging.getLogger(__name__)

FREQUENCY_CHOICES = [f.value for f in PaymentFrequency]


def _mkdirp(path: str) -> None:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)


def _inputs_from_args(args: argparse.Namespace) -> ScheduleInputs:
    return ScheduleInputs(
        rental_amount=args.rental_amount,
        service_charge=args.service_charge,
        vat_percentage=args.vat_percentage,
        security_deposit=args.security_deposit,
        payment_frequency=args.payment_frequency,
        duration=args.duration,
        start_date=args.start_date,
        currency=args.currency,
    )


def cmd_build_schedule(args: argparse.Namespace) -> int:
    summary = build_payment_schedule(_inputs_from_args(args))
    out = summary.to_dict()
    if args.out_csv:
        _mkdirp(args.out_csv)
        schedule_to_frame(summary).to_csv(args.out_csv, index=False)
        out["out_csv"] = args.out_csv
    print(json.dumps(out, indent=2, sort_keys=True))
    return 0


def cmd_build_schedules(args: argparse.Namespace) -> int:
    inputs_df = pd.read_csv(args.inputs_csv, dtype=str, keep_default_na=False)
    logger.info("Read %s contract rows from %s", len(inputs_df), args.inputs_csv)
    out_df = build_schedules_frame(inputs_df)
    _mkdirp(args.out_csv)
    out_df.to_csv(args.out_csv, index=False)
    out = {
        "out_csv": args.out_csv,
        "n_contracts": int(len(inputs_df)),
        "n_rows": int(len(out_df)),
    }
    print(json.dumps(out, indent=2, sort_keys=True))
    return 0


def _load_inputs_json(inputs_json: str) -> dict[str, Any]:
    try:
        d = json.loads(inputs_json)
    except json.JSONDecodeError as e:
        raise SystemExit(f"--inputs-json must be valid JSON: {e}") from e
    if not isinstance(d, dict):
        raise SystemExit("--inputs-json must decode to an object/dict")
    return d


def cmd_contract_request(args: argparse.Namespace) -> int:
    raw = _load_inputs_json(args.inputs_json)
    inputs = ScheduleInputs.from_dict(raw)
    summary = build_payment_schedule(inputs)
    currency = args.currency or inputs.currency
    try:
        payload = build_create_contract_request(
            summary,
            owner=args.owner,
            tenant=args.tenant,
            property_id=args.property,
            unit=args.unit,
            start_date=args.start_date or inputs.start_date,
            end_date=args.end_date,
            currency=currency,
            service_charge=inputs.service_charge,
            deposit=inputs.security_deposit,
        )
    except ContractRequestError as e:
        raise SystemExit(f"cannot build contract request: {e}") from e
    print(json.dumps(payload, indent=2, sort_keys=True))
    return 0


def _add_schedule_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--rental-amount", required=True, help='Annual rent, e.g. "12,000".')
    p.add_argument("--service-charge", default="", help="Annual service charge.")
    p.add_argument("--vat-percentage", default="", help="VAT rate in percent, e.g. 15.")
    p.add_argument("--security-deposit", default="")
    p.add_argument("--payment-frequency", default=PaymentFrequency.MONTHLY.value, choices=FREQUENCY_CHOICES)
    p.add_argument("--duration", default="", help='Free text, e.g. "1 year 2 months". Empty means one year.')
    p.add_argument("--start-date", required=True, help="Contract start date (YYYY-MM-DD).")
    p.add_argument("--currency", default="")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="lease-schedule")
    p.add_argument("--log-level", default="WARNING", help="Python logging level.")
    sub = p.add_subparsers(dest="cmd", required=True)

    b = sub.add_parser("build-schedule", help="Compute the payment schedule for one contract.")
    _add_schedule_args(b)
    b.add_argument("--out-csv", default=None, help="Also write the payment table to this CSV.")
    b.set_defaults(func=cmd_build_schedule)

    bs = sub.add_parser("build-schedules", help="Compute schedules for every contract row in a CSV.")
    bs.add_argument("--inputs-csv", required=True)
    bs.add_argument("--out-csv", required=True)
    bs.set_defaults(func=cmd_build_schedules)

    cr = sub.add_parser("contract-request", help="Build the create-contract payload from schedule inputs.")
    cr.add_argument("--inputs-json", required=True, help="Schedule inputs as a camelCase JSON object.")
    cr.add_argument("--owner", required=True)
    cr.add_argument("--tenant", required=True)
    cr.add_argument("--property", required=True)
    cr.add_argument("--unit", required=True)
    cr.add_argument("--start-date", default=None, help="Defaults to startDate from --inputs-json.")
    cr.add_argument("--end-date", required=True)
    cr.add_argument("--currency", default=None, help="Defaults to currency from --inputs-json.")
    cr.set_defaults(func=cmd_contract_request)

    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
