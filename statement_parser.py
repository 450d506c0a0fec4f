#!/usr/bin/env python3
"""CLI for extracting transactions from bank and card statement PDFs."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from project_paths import DEFAULT_CSV_NAME, output_dir, statements_dir
from statement_extractor import (
    PARSERS,
    StatementParseError,
    get_parser,
    source_rollups,
    statement_stats,
    write_csv,
    write_json,
    write_xlsx,
)
from statement_extractor.ingest import load_transactions
from statement_extractor.page_extractor import DECODERS


def main() -> None:
    ap = argparse.ArgumentParser(
        description="Parse statement PDFs under <folder>/statements/<institution>/ into CSV/JSON/XLSX."
    )
    ap.add_argument("folder", type=Path, help="Personal finances folder")
    ap.add_argument(
        "--institution", action="append", choices=sorted(PARSERS), default=None,
        help="Institution to parse (repeatable, default: all)",
    )
    ap.add_argument("--csv", type=Path, default=None, help="Output CSV path")
    ap.add_argument("--json", type=Path, default=None, help="Optional JSON output path")
    ap.add_argument("--xlsx", type=Path, default=None, help="Optional XLSX workbook path")
    ap.add_argument("--workers", type=int, default=1, help="Statements parsed in parallel per institution")
    ap.add_argument("--decoder", choices=DECODERS, default="pdfplumber", help="PDF text decoder")
    ap.add_argument(
        "--exclude-font", action="append", default=[], dest="exclude_fonts",
        help="Drop characters whose font name contains this text (repeatable)",
    )
    ap.add_argument("--print-rollups", action="store_true", help="Print per-source monthly totals after parsing")
    ap.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="INFO")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    decoder_options = {"decoder": args.decoder}
    if args.exclude_fonts:
        decoder_options["exclude_fonts"] = args.exclude_fonts

    transactions = []
    try:
        for source in args.institution or sorted(PARSERS):
            parser = get_parser(source)
            transactions.extend(
                load_transactions(parser, statements_dir(args.folder, source), args.workers, **decoder_options)
            )
    except StatementParseError as exc:
        print(f"Parse failed, no output written: {exc}")
        sys.exit(1)

    if not transactions:
        print("No statements found")
        sys.exit(1)

    transactions.sort(key=lambda t: t.date, reverse=True)

    csv_path = args.csv
    if not (args.csv or args.json or args.xlsx):
        csv_path = output_dir(args.folder) / DEFAULT_CSV_NAME
    if csv_path:
        write_csv(transactions, csv_path)
    if args.json:
        write_json(transactions, args.json)
    if args.xlsx:
        write_xlsx(transactions, args.xlsx)

    stats = statement_stats(transactions)
    print(f"Rows: {stats['count']}  ({stats['oldest']:%Y/%m/%d} to {stats['newest']:%Y/%m/%d})")
    print(f"Total: ${stats['total']:.2f}")
    if csv_path:
        print(f"CSV: {csv_path}")
    if args.json:
        print(f"JSON: {args.json}")
    if args.xlsx:
        print(f"XLSX: {args.xlsx}")
    if args.print_rollups:
        print("\nPer-month rollups:")
        for (source, y, m), sums in sorted(source_rollups(transactions).items()):
            print(
                f"  {source} {m:02d}/{y}: credits=${sums['credits']:.2f}  "
                f"debits=${sums['debits']:.2f}  net=${sums['net']:.2f}"
            )


if __name__ == "__main__":
    main()
