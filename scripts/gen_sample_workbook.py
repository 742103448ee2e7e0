#!/usr/bin/env python3
"""Generate a synthetic member workbook for trying the lookup locally.

The layout matches what the workbook store expects:
- Row 1: header row (Hebrew labels, as in the production sheet)
- Row 2+: one member per row, national ID in column A

Usage:
    python scripts/gen_sample_workbook.py --rows 2000 --output data/members.xlsx
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

HEADERS = [
    "ת.ז.", "שם משפחה", "שם פרטי", "שנת לידה", "שם האב", "רחוב", "מספר בית", "עיר",
    "טלפון נייד", "אימייל",
    "ת.ז. בן זוג", "שם משפחה בן זוג", "שם פרטי בן זוג", "טלפון בן זוג",
    "מספר אשראי", "תוקף אשראי", "שם בעל הכרטיס",
]

LAST_NAMES = ["כהן", "לוי", "מזרחי", "פרץ", "ביטון", "דהן", "אברהם", "פרידמן"]
FIRST_NAMES = ["דנה", "יוסי", "רון", "נועה", "מיכל", "אבי", "שירה", "עומר"]
CITIES = ["ירושלים", "תל אביב", "חיפה", "באר שבע", "נתניה"]
STREETS = ["הרצל", "ויצמן", "בן יהודה", "רוטשילד", "הנביאים"]


def generate_members(rows: int, seed: int = 42, partner_ratio: float = 0.5) -> pd.DataFrame:
    """Generate ``rows`` synthetic members.

    IDs are 9-digit strings (leading zeros kept). Roughly ``partner_ratio``
    of the members get partner fields; the rest leave them blank.
    """
    rng = np.random.default_rng(seed)
    ids = rng.choice(10**9, size=rows, replace=False)
    records = []
    for i in range(rows):
        last = rng.choice(LAST_NAMES)
        first = rng.choice(FIRST_NAMES)
        has_partner = rng.random() < partner_ratio
        records.append([
            f"{ids[i]:09d}",
            last,
            first,
            str(rng.integers(1940, 2005)),
            rng.choice(FIRST_NAMES),
            rng.choice(STREETS),
            str(rng.integers(1, 120)),
            rng.choice(CITIES),
            f"05{rng.integers(0, 9)}-{rng.integers(1_000_000, 9_999_999)}",
            f"member{i}@example.com",
            f"{rng.integers(0, 10**9):09d}" if has_partner else "",
            last if has_partner else "",
            rng.choice(FIRST_NAMES) if has_partner else "",
            f"05{rng.integers(0, 9)}-{rng.integers(1_000_000, 9_999_999)}" if has_partner else "",
            f"4580{rng.integers(10**11, 10**12)}",
            f"{rng.integers(1, 13):02d}/{rng.integers(26, 32)}",
            f"{first} {last}",
        ])
    return pd.DataFrame([HEADERS] + records)


def write_workbook(df: pd.DataFrame, output: Path, sheet_name: str) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(output) as writer:
        df.to_excel(writer, sheet_name=sheet_name, header=False, index=False)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Generate a synthetic member workbook")
    p.add_argument("--rows", type=int, default=1000, help="Number of members (default: 1000)")
    p.add_argument("--output", type=Path, default=Path("data/members.xlsx"), help="Output .xlsx path")
    p.add_argument("--sheet-name", default="ראשי", help="Sheet name (default: ראשי)")
    p.add_argument("--seed", type=int, default=42, help="Random seed")
    args = p.parse_args(argv)

    if args.rows < 1:
        print("rows must be >= 1", file=sys.stderr)
        return 1

    df = generate_members(args.rows, seed=args.seed)
    write_workbook(df, args.output, args.sheet_name)
    print(f"wrote {args.rows} members to {args.output} (sheet '{args.sheet_name}')")
    print(f"first id: {df.iloc[1, 0]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
