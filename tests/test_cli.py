from __future__ import annotations

import json

import pandas as pd
import pytest

from lease_schedule.cli import main


def test_build_schedule_prints_summary(capsys, tmp_path):
    out_csv = tmp_path / "out" / "schedule.csv"
    rc = main(
        [
            "build-schedule",
            "--rental-amount",
            "12,000",
            "--service-charge",
            "2,400",
            "--vat-percentage",
            "15",
            "--payment-frequency",
            "Quarterly",
            "--duration",
            "1 year 1 month",
            "--start-date",
            "2025-01-01",
            "--currency",
            "AED",
            "--out-csv",
            str(out_csv),
        ]
    )
    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    assert out["numberOfPayments"] == 5
    assert out["grandTotal"] == 17_940.0

    df = pd.read_csv(out_csv)
    assert df["monthsCovered"].tolist() == [3, 3, 3, 3, 1]


def test_build_schedules_batch(capsys, tmp_path):
    inputs_csv = tmp_path / "contracts.csv"
    pd.DataFrame(
        [
            {"contractId": "C1", "rentalAmount": "12,000", "paymentFrequency": "Monthly", "duration": "6 months"},
            {"contractId": "C2", "rentalAmount": "", "paymentFrequency": "Annually", "duration": ""},
        ]
    ).to_csv(inputs_csv, index=False)
    out_csv = tmp_path / "schedules.csv"

    rc = main(["build-schedules", "--inputs-csv", str(inputs_csv), "--out-csv", str(out_csv)])
    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {"out_csv": str(out_csv), "n_contracts": 2, "n_rows": 7}


def test_contract_request(capsys):
    inputs = {
        "rentalAmount": "12,000",
        "serviceCharge": "2,400",
        "vatPercentage": "15",
        "paymentFrequency": "Quarterly",
        "duration": "1 year",
        "startDate": "2025-01-01",
        "currency": "AED",
    }
    rc = main(
        [
            "contract-request",
            "--inputs-json",
            json.dumps(inputs),
            "--owner",
            "o1",
            "--tenant",
            "t1",
            "--property",
            "p1",
            "--unit",
            "u1",
            "--end-date",
            "2025-12-31",
        ]
    )
    assert rc == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["amount"] == {"currency": "AED", "value": 12_000.0}
    assert payload["VAT"]["value"] == 2_160.0
    assert payload["paymentFrequency"] == "quarterly"


def test_contract_request_rejects_bad_json():
    with pytest.raises(SystemExit):
        main(
            [
                "contract-request",
                "--inputs-json",
                "{not json",
                "--owner",
                "o1",
                "--tenant",
                "t1",
                "--property",
                "p1",
                "--unit",
                "u1",
                "--end-date",
                "2025-12-31",
            ]
        )
