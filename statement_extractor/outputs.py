from __future__ import annotations

import csv
import json
from dataclasses import asdict
from pathlib import Path
from typing import List, Sequence

from openpyxl import Workbook
from openpyxl.styles import Font

from .models import TransactionRecord

DATE_FORMAT = "%Y/%m/%d"
HEADER = ["Date", "Name", "Amount", "Source"]


def write_csv(transactions: List[TransactionRecord], out_path: Path) -> None:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f, lineterminator="\n")
        w.writerow(HEADER)
        for t in transactions:
            w.writerow([t.date.strftime(DATE_FORMAT), t.name, f"{t.amount:.2f}", t.source])


def write_json(transactions: List[TransactionRecord], out_path: Path) -> None:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(
            [
                {**asdict(t), "date": t.date.isoformat(), "amount": float(t.amount)}  # JSON-friendly
                for t in transactions
            ],
            f,
            ensure_ascii=False,
            indent=2,
        )


def write_xlsx(transactions: List[TransactionRecord], out_path: Path, sheet_name: str = "Transactions") -> None:
    """Write a workbook with one row per transaction under a Date/Name/Amount/Source header."""
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name
    ws.append(HEADER)
    for cell in ws[1]:
        cell.font = Font(bold=True)
    for t in transactions:
        ws.append([t.date, t.name, float(t.amount), t.source])
        row = ws.max_row
        ws.cell(row=row, column=1).number_format = "yyyy/mm/dd"
        ws.cell(row=row, column=3).number_format = "#,##0.00"
    ws.freeze_panes = "A2"
    wb.save(out_path)


def write_lines(lines: Sequence[str], out_path: Path) -> None:
    """Dump reconstructed statement lines, one per line."""
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text("\n".join(lines), encoding="utf-8")
