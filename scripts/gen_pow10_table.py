"""Build, verify and render the Eisel-Lemire power-of-ten table.

Build-time tool. The runtime builds the same table at import; this script
exists for hosts that prefer to ship the table as generated source, and for
inspecting entries when changing the supported exponent range.

Examples:
  python scripts/gen_pow10_table.py --summary
  python scripts/gen_pow10_table.py --min-exp -307 --max-exp 288 --out el_pow10_table.py
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional
import argparse
import sys

from elparse.core import POW10_MIN_EXP, POW10_MAX_EXP, TableGenerationError, fmt_u64
from elparse.tables import PowerTable, build_power_table, render_table, verify_table


def print_summary(table: PowerTable) -> None:
    print(f"range   : [{table.min_exp}, {table.max_exp}] ({len(table)} entries)")
    for entry in (table.entries[0], table.lookup(0), table.entries[-1]):
        if entry is None:
            continue
        print(f"10^{entry.e10:<5d}: hi={fmt_u64(entry.hi64)} lo={fmt_u64(entry.lo64)} biased_e2={entry.biased_e2} (pow2={entry.e2})")


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Eisel-Lemire power-of-ten table generator")
    parser.add_argument("--min-exp", type=int, default=POW10_MIN_EXP, help="Smallest decimal exponent (inclusive)")
    parser.add_argument("--max-exp", type=int, default=POW10_MAX_EXP, help="Largest decimal exponent (inclusive)")
    parser.add_argument("--name", type=str, default="POW10_TABLE", help="Variable name used in the rendered source")
    parser.add_argument("--out", type=Path, default=None, help="Write rendered source here instead of stdout")
    parser.add_argument("--summary", action="store_true", help="Print a short summary instead of the rendered source")
    args = parser.parse_args(argv)

    try:
        table = build_power_table(args.min_exp, args.max_exp)
        verify_table(table)
    except TableGenerationError as exc:
        print(f"[gen_pow10_table] {exc}", file=sys.stderr)
        return 1

    if args.summary:
        print_summary(table)
        return 0

    source = render_table(table, name=args.name)
    if args.out is None:
        sys.stdout.write(source)
    else:
        args.out.write_text(source)
        print(f"[gen_pow10_table] wrote {len(table)} entries to {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
