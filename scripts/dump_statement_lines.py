#!/usr/bin/env python3
"""Write the reconstructed text lines of a statement PDF for debugging.

The dump shows exactly what the statement parsers see, page markers and
column spacing included. With ``--parse`` the lines are also run through a
parser and each transaction is printed.

Example
-------
    python scripts/dump_statement_lines.py statements/chase_credit_card/20240201-statement.pdf --parse chase_credit_card
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from statement_extractor import PARSERS, get_parser, write_lines
from statement_extractor.page_extractor import DECODERS, read_statement_lines


def dump_lines(pdf_path: Path, out_path: Path | None = None, decoder: str = "pdfplumber") -> Path:
    pdf_path = Path(pdf_path)
    lines = read_statement_lines(pdf_path, decoder=decoder)
    out_path = Path(out_path) if out_path else Path(f"debug-{pdf_path.stem}.txt")
    write_lines(lines, out_path)
    return out_path


def main() -> None:
    ap = argparse.ArgumentParser(description="Dump reconstructed statement lines")
    ap.add_argument("pdf", type=Path, help="Statement PDF path")
    ap.add_argument("--out", type=Path, default=None, help="Text output path (default: debug-<name>.txt)")
    ap.add_argument("--decoder", choices=DECODERS, default="pdfplumber")
    ap.add_argument("--parse", choices=sorted(PARSERS), default=None, help="Also parse with this institution's parser")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    out_path = dump_lines(args.pdf, args.out, args.decoder)
    print(f"Lines: {out_path}")

    if args.parse:
        statement = get_parser(args.parse).parse_pdf(args.pdf, decoder=args.decoder)
        for t in statement.transactions:
            print(f"{t.date:%Y/%m/%d}  {t.amount:>10.2f}  {t.name}")


if __name__ == "__main__":
    main()
