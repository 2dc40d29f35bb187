"""
Batch Validator — document numbers from a CSV file

Runs every row through the validation service and prints one verdict per
row plus totals. Rows are `kind,value[,country]`; kind is a document slug
(`cpf`, `us-ssn`, ...) or `passport`, in which case `country` is required.

Usage:
    python -m scripts.validate_batch rows.csv [--output data/results/batch.json] [--only-invalid]
"""
import argparse
import csv
import json
import os
import sys
import time
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from idcheck import build_service
from idcheck.core.entities.document import Passport
from idcheck.core.use_cases.validate_identity import IdentityValidationService


def validate_row(service: IdentityValidationService, row: list[str]) -> dict:
    """Validate a single CSV row."""
    cells = [c.strip() for c in row]
    kind = cells[0] if cells else ""
    value = row[1] if len(row) > 1 else ""
    country = cells[2] if len(cells) > 2 else ""

    result = {"kind": kind, "value": value}

    if kind.lower() == "passport":
        result["country"] = country
        verdict = service.validate_field(Passport(country_code=country), value)
    else:
        verdict = service.validate_field(kind, value)

    result.update(verdict.to_dict())
    if verdict.failure is not None:
        result["failure"] = verdict.failure.value
    return result


def read_rows(path: str) -> list[list[str]]:
    with open(path, newline="", encoding="utf-8") as f:
        rows = [r for r in csv.reader(f) if r and not r[0].lstrip().startswith("#")]
    # Optional header
    if rows and rows[0][0].strip().lower() == "kind":
        rows = rows[1:]
    return rows


def main():
    parser = argparse.ArgumentParser(description="Validate document numbers from a CSV file")
    parser.add_argument("input", help="CSV with kind,value[,country] rows")
    parser.add_argument("--output", default="", help="Write a JSON report to this path")
    parser.add_argument("--only-invalid", action="store_true", help="Print rejected rows only")
    args = parser.parse_args()

    rows = read_rows(args.input)
    service = build_service()

    print(f"{'='*60}")
    print(f"  idcheck — Batch Validator")
    print(f"{'='*60}")
    print(f"  Input: {args.input}")
    print(f"  Rows:  {len(rows)}")
    print(f"{'='*60}\n")

    t0 = time.perf_counter()
    results = []
    totals = {"valid": 0, "FORMAT": 0, "CHECKSUM": 0}
    by_kind: dict[str, dict] = {}

    for i, row in enumerate(rows, start=1):
        result = validate_row(service, row)
        results.append(result)

        bucket = "valid" if result["valid"] else result.get("failure", "FORMAT")
        totals[bucket] += 1
        kind_stats = by_kind.setdefault(result["kind"], {"total": 0, "valid": 0})
        kind_stats["total"] += 1
        kind_stats["valid"] += int(result["valid"])

        if result["valid"] and args.only_invalid:
            continue
        mark = "✓" if result["valid"] else "✗"
        detail = "" if result["valid"] else f"  {result['error']}"
        print(f"  [{i:4d}] {mark} {result['kind']:24s} {result['value']!r}{detail}")

    elapsed_ms = (time.perf_counter() - t0) * 1000

    if args.output:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        report = {
            "metadata": {
                "input": args.input,
                "total_rows": len(rows),
                "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
            },
            "summary": {"totals": totals, "by_kind": by_kind, "elapsed_ms": round(elapsed_ms, 1)},
            "results": results,
        }
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, ensure_ascii=False)
        print(f"\n  → Saved to: {args.output}")

    # ── Print Summary ──
    print(f"\n{'='*60}")
    print(f"  BATCH SUMMARY")
    print(f"{'='*60}")
    print(f"  Total rows:       {len(rows)}")
    print(f"  Valid:            {totals['valid']}")
    print(f"  Format errors:    {totals['FORMAT']}")
    print(f"  Checksum errors:  {totals['CHECKSUM']}")
    print(f"  Time:             {elapsed_ms:.1f} ms")
    print(f"{'='*60}")

    sys.exit(0 if totals["valid"] == len(rows) else 1)


if __name__ == "__main__":
    main()
