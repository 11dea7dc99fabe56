from __future__ import annotations

from typing import Any

import pandas as pd

from lease_schedule.inputs.schema import ScheduleInputs
from lease_schedule.schedule.engine import ScheduleSummary, build_payment_schedule

PAYMENT_COLUMNS = [
    "paymentNumber",
    "dueDate",
    "formattedDueDate",
    "monthsCovered",
    "baseRental",
    "serviceCharge",
    "subtotal",
    "vatAmount",
    "totalAmount",
    "currency",
]

INPUT_COLUMNS = [
    "rentalAmount",
    "serviceCharge",
    "vatPercentage",
    "securityDeposit",
    "paymentFrequency",
    "duration",
    "startDate",
    "currency",
]


def schedule_to_frame(summary: ScheduleSummary) -> pd.DataFrame:
    rows = [p.to_dict() for p in summary.payments]
    return pd.DataFrame(rows, columns=PAYMENT_COLUMNS)


def _cell_to_text(value: Any) -> str:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    return str(value)


def build_schedules_frame(inputs_df: pd.DataFrame) -> pd.DataFrame:
    """
    Batch mode: one schedule per input row, stacked into a single table.

    Rows are keyed by `contractId` when the column is present, otherwise by the
    row index. Missing cells are treated as empty text, so a broken row yields
    a degenerate schedule rather than stopping the batch.
    """
    frames = []
    for idx, row in inputs_df.iterrows():
        record = {c: _cell_to_text(row[c]) for c in INPUT_COLUMNS if c in inputs_df.columns}
        summary = build_payment_schedule(ScheduleInputs.from_dict(record))
        df = schedule_to_frame(summary)
        contract_id = row["contractId"] if "contractId" in inputs_df.columns else idx
        df.insert(0, "contractId", contract_id)
        frames.append(df)

    if not frames:
        return pd.DataFrame(columns=["contractId", *PAYMENT_COLUMNS])
    return pd.concat(frames, ignore_index=True)
