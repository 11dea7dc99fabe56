from __future__ import annotations

import argparse
import os

import numpy as np
import pandas as pd


def _duration_text(years: int, months: int) -> str:
    parts = []
    if years:
        parts.append(f"{years} year" + ("s" if years != 1 else ""))
    if months:
        parts.append(f"{months} month" + ("s" if months != 1 else ""))
    return " ".join(parts)


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--out", required=True)
    ap.add_argument("--rows", type=int, default=500)
    ap.add_argument("--seed", type=int, default=0)
    args = ap.parse_args()

    rng = np.random.default_rng(args.seed)

    frequencies = ["Monthly", "Quarterly", "Semi-annually", "Annually"]
    currencies = ["AED", "SAR", "USD", "EUR"]
    vat_rates = [0, 5, 15]

    frequency = rng.choice(frequencies, size=args.rows, p=[0.4, 0.3, 0.15, 0.15])
    currency = rng.choice(currencies, size=args.rows)
    vat = rng.choice(vat_rates, size=args.rows)

    # Annual rent rounded to the nearest 500; service charge 5-20% of rent.
    rent = (rng.lognormal(mean=11.0, sigma=0.6, size=args.rows) / 500.0).round() * 500.0
    rent = rent.clip(6000, None)
    service = (rent * rng.uniform(0.05, 0.20, size=args.rows)).round(2)
    deposit = (rent * rng.choice([0.05, 0.1, 0.25], size=args.rows)).round(2)

    years = rng.integers(0, 4, size=args.rows)
    months = rng.integers(0, 12, size=args.rows)
    months = np.where((years == 0) & (months == 0), 6, months)

    offsets = rng.integers(0, 365, size=args.rows)
    start = pd.Timestamp("2025-01-01") + pd.to_timedelta(offsets, unit="D")

    df = pd.DataFrame(
        {
            "contractId": [f"C{i:05d}" for i in range(args.rows)],
            "rentalAmount": [f"{r:,.2f}" for r in rent],
            "serviceCharge": [f"{s:,.2f}" for s in service],
            "vatPercentage": vat.astype(str),
            "securityDeposit": [f"{d:,.2f}" for d in deposit],
            "paymentFrequency": frequency,
            "duration": [_duration_text(int(y), int(m)) for y, m in zip(years, months)],
            "startDate": start.strftime("%Y-%m-%d"),
            "currency": currency,
        }
    )

    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
    df.to_csv(args.out, index=False)
    print(f"wrote {args.out} rows={len(df)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
