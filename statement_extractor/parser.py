# -*- coding: utf-8 -*-
"""
Line-oriented state machine turning reconstructed statement text into transactions.

The scan loop lives in :class:`StatementParser`; each institution subclass only
supplies its table literals, transaction grammar and a few small hooks.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Dict, List, Optional, Pattern, Sequence, Tuple, Type

from .dates import MONTHS, month_from_abbreviation, resolve_transaction_date
from .errors import (
    FilenameDateParseError,
    StatementParseError,
    StatementPeriodMismatchError,
    UnexpectedSeparatorWidthError,
    UnresolvedTransactionDateError,
)
from .lines import is_page_marker
from .models import StatementRecord, TransactionRecord
from .page_extractor import read_statement_lines
from .stats import assemble_statement

logger = logging.getLogger(__name__)

_MONTH_ALTERNATION = "|".join(MONTHS)


# ------------------------------
# Shared scan loop
# ------------------------------
class StatementParser:
    source: str = ""

    # A line starting the transaction table.
    _table_start: Pattern[str]
    # Lines that end the table (page footers, the next section).
    _table_end: Tuple[Pattern[str], ...] = ()
    # Lines inside the table that never carry a transaction.
    _skip_line: Tuple[Pattern[str], ...] = ()
    # Leading transaction date with ``month`` and ``day`` groups.
    _date_prefix: Pattern[str]
    # Transaction body with ``name``, ``separator`` and ``amount`` groups.
    _transaction: Pattern[str]
    # Statement period printed outside the table; ``None`` disables the check.
    _statement_period: Optional[Pattern[str]] = None
    _statement_period_format = "%m/%d/%y"

    # Drop the last line of every page (footer garble).
    discard_page_footer = False
    # Decorative fonts whose characters never belong to statement text.
    exclude_fonts: Tuple[str, ...] = ()

    # ---------- hooks ----------
    def statement_date(self, filename: str) -> date:
        raise NotImplementedError

    def _transaction_month(self, token: str) -> int:
        return int(token)

    def _signed_amount(self, amount: Decimal, separator: str, line: str) -> Decimal:
        return amount

    # ---------- helpers ----------
    @staticmethod
    def _money_to_decimal(s: str) -> Decimal:
        s = s.strip().replace("$", "").replace(",", "")
        try:
            return Decimal(s)
        except InvalidOperation:
            raise StatementParseError(f"Not an amount: {s!r}") from None

    def _at_page_end(self, lines: Sequence[str], idx: int) -> bool:
        return idx + 1 >= len(lines) or is_page_marker(lines[idx + 1])

    def _check_statement_period(self, statement_date: date, line: str) -> None:
        if self._statement_period is None:
            return
        m = self._statement_period.search(line)
        if not m:
            return
        printed = datetime.strptime(m.group(1), self._statement_period_format).date()
        if printed != statement_date:
            raise StatementPeriodMismatchError(
                f"Statement period in document ({printed:%Y/%m/%d}) differs from "
                f"statement period in filename ({statement_date:%Y/%m/%d})"
            )

    # ---------- main scan ----------
    def parse(self, filename: str, lines: Sequence[str]) -> StatementRecord:
        statement_date = self.statement_date(filename)

        transactions: List[TransactionRecord] = []
        inside_table = False
        transaction_date: Optional[date] = None

        for idx, raw in enumerate(lines):
            line = raw.strip()

            if is_page_marker(line):
                inside_table = False
                continue

            if self.discard_page_footer and self._at_page_end(lines, idx):
                inside_table = False
                logger.debug("Dropping page footer: %r", line)
                continue

            if any(p.search(line) for p in self._table_end):
                inside_table = False
                continue

            if self._table_start.search(line):
                inside_table = True
                continue

            if not inside_table:
                self._check_statement_period(statement_date, line)
                continue

            if not line or any(p.search(line) for p in self._skip_line):
                continue

            d = self._date_prefix.match(line)
            if d:
                try:
                    transaction_date = resolve_transaction_date(
                        statement_date,
                        self._transaction_month(d.group("month")),
                        int(d.group("day")),
                    )
                except ValueError as exc:
                    raise StatementParseError(f"Invalid transaction date in {filename} ({exc}):\n{line}") from exc
                rest = line[d.end():].strip()
            else:
                rest = line

            m = self._transaction.match(rest)
            if m:
                if transaction_date is None:
                    raise UnresolvedTransactionDateError(
                        f"Transaction before any transaction date in {filename}:\n{line}"
                    )
                amount = self._signed_amount(
                    self._money_to_decimal(m.group("amount")), m.group("separator"), line
                )
                transactions.append(
                    TransactionRecord(
                        source=self.source,
                        date=transaction_date,
                        name=m.group("name").strip(),
                        amount=amount,
                    )
                )
            elif d:
                logger.debug("Skipping dated line without an amount: %r", line)
            else:
                if not transactions:
                    raise UnresolvedTransactionDateError(
                        f"Continuation line before any transaction in {filename}:\n{line}"
                    )
                transactions[-1].name += " " + rest

        return assemble_statement(self.source, statement_date, transactions)

    def parse_pdf(self, pdf_path: Path, **decoder_options) -> StatementRecord:
        pdf_path = Path(pdf_path)
        exclude_fonts = tuple(decoder_options.pop("exclude_fonts", ()))
        # Font filtering is a pdfplumber feature; pdfium text runs carry no font names.
        if decoder_options.get("decoder", "pdfplumber") == "pdfplumber":
            exclude_fonts = tuple(self.exclude_fonts) + exclude_fonts
        if exclude_fonts:
            decoder_options["exclude_fonts"] = exclude_fonts
        lines = read_statement_lines(pdf_path, **decoder_options)
        return self.parse(pdf_path.name, lines)


# ------------------------------
# Institutions
# ------------------------------
class ChaseParser(StatementParser):
    source = "chase_credit_card"

    _filename_date = re.compile(r"(\d{8})-")

    # "Date of" sits on the line above; spacing varies between statements.
    _table_start = re.compile(r"Transaction\s+Merchant Name or Transaction Description")
    _table_end = (re.compile(r"Page \d+ of \d+"),)
    _skip_line = (
        re.compile(r"^(?:PAYMENTS AND OTHER CREDITS|PURCHASES?|FEES CHARGED|INTEREST CHARGED|"
                   r"CASH ADVANCES?|BALANCE TRANSFERS?)$", re.IGNORECASE),
        re.compile(r"^TOTAL (?:FEES|INTEREST) FOR THIS PERIOD", re.IGNORECASE),
        re.compile(r"^Year-to-date totals", re.IGNORECASE),
    )
    _date_prefix = re.compile(r"^(?P<month>\d\d)/(?P<day>\d\d)\s")
    # Example: "AMAZON MKTPL*AB12C Amzn.com/bill WA 23.45" or "Payment Thank You -500.00"
    _transaction = re.compile(r"^(?P<name>.+?)(?P<separator>\s+)(?P<amount>-?\d[\d,]*\.\d{2})$")
    # Example: "Statement Date: 01/31/24"
    _statement_period = re.compile(r"Statement Date:\s*(\d\d/\d\d/\d\d)$")

    def statement_date(self, filename: str) -> date:
        m = self._filename_date.search(filename)
        if not m:
            raise FilenameDateParseError(f"No YYYYMMDD- date in Chase statement filename {filename!r}")
        try:
            return datetime.strptime(m.group(1), "%Y%m%d").date()
        except ValueError:
            raise FilenameDateParseError(
                f"Invalid date {m.group(1)!r} in Chase statement filename {filename!r}"
            ) from None


class GlensFallsParser(StatementParser):
    source = "glens_falls_national_bank"

    # Example: "Statement+Jan+31,+2024.pdf"
    _filename_date = re.compile(r"(?P<month>[A-Za-z]+)\+(?P<day>\d+),\+(?P<year>\d{4})\.pdf")

    _table_start = re.compile(r"^MISCELLANEOUS DEBITS & CREDITS")
    _table_end = (re.compile(r"^FEE RECAP"),)
    _skip_line = (
        re.compile(r"^Date\s+Description\b"),     # column header under the section title
        re.compile(r"BEGINNING BALANCE"),
        re.compile(r"ENDING BALANCE"),
    )
    _date_prefix = re.compile(rf"^(?P<month>{_MONTH_ALTERNATION}) (?P<day>\d{{1,2}})\s")
    # Deposits and withdrawals share one line layout; only the gap before the
    # amount tells the two columns apart.
    # Example: "ATM WITHDRAWAL   60.00 1,234.56"
    _transaction = re.compile(
        r"^(?P<name>.+?)(?P<separator> +)(?P<amount>\d[\d,]*\.\d{2}) +(?P<balance>\d[\d,]*\.\d{2})$"
    )

    discard_page_footer = True
    exclude_fonts = ("g_d2_f3", "g_d0_f3")

    # separator -> sign of the amount column it precedes
    _column_signs = {
        " ": Decimal(1),      # Deposits
        "   ": Decimal(-1),   # Withdrawals, with the Deposits column empty
    }

    def statement_date(self, filename: str) -> date:
        m = self._filename_date.search(filename)
        if not m:
            raise FilenameDateParseError(f"Unable to parse date from statement filename {filename!r}")
        try:
            return date(int(m.group("year")), month_from_abbreviation(m.group("month")), int(m.group("day")))
        except ValueError as exc:
            raise FilenameDateParseError(f"Unable to parse date from statement filename {filename!r}: {exc}") from None

    def _transaction_month(self, token: str) -> int:
        return month_from_abbreviation(token)

    def _signed_amount(self, amount: Decimal, separator: str, line: str) -> Decimal:
        sign = self._column_signs.get(separator)
        if sign is None:
            raise UnexpectedSeparatorWidthError(
                f"Could not determine which column the amount {amount} was from "
                f"({len(separator)} spaces) in line:\n{line}"
            )
        return amount * sign


PARSERS: Dict[str, Type[StatementParser]] = {
    ChaseParser.source: ChaseParser,
    GlensFallsParser.source: GlensFallsParser,
}


def get_parser(source: str) -> StatementParser:
    """Instantiate the parser registered for ``source``."""
    try:
        return PARSERS[source]()
    except KeyError:
        raise KeyError(f"No statement parser for {source!r}; known: {', '.join(sorted(PARSERS))}") from None
