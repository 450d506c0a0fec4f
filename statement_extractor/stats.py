from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Dict, List, Tuple

from .errors import EmptyStatementError
from .models import StatementRecord, TransactionRecord

logger = logging.getLogger(__name__)


def statement_stats(transactions: List[TransactionRecord]) -> Dict[str, object]:
    """Count, date range and signed total of a transaction list."""
    total = Decimal("0.00")
    for t in transactions:
        total += t.amount
    dates = [t.date for t in transactions]
    return {
        "count": len(transactions),
        "oldest": min(dates) if dates else None,
        "newest": max(dates) if dates else None,
        "total": total,
    }


def assemble_statement(
    source: str, statement_period: date, transactions: List[TransactionRecord]
) -> StatementRecord:
    """Wrap a finished scan into a :class:`StatementRecord`.

    Raises
    ------
    EmptyStatementError
        If the scan produced no transactions, which almost always means the
        table boundaries were not recognised.
    """
    if not transactions:
        raise EmptyStatementError(
            f"{source} statement {statement_period:%Y/%m/%d} has no transactions; "
            "were the table headers found?"
        )
    stats = statement_stats(transactions)
    logger.info(
        "Parsed %d transactions for statement period %s ($%.2f from %s to %s)",
        stats["count"],
        f"{statement_period:%Y/%m/%d}",
        stats["total"],
        f"{stats['oldest']:%Y/%m/%d}",
        f"{stats['newest']:%Y/%m/%d}",
    )
    return StatementRecord(
        source=source,
        statement_period=statement_period,
        transactions=transactions,
    )


def source_rollups(
    transactions: List[TransactionRecord],
) -> Dict[Tuple[str, int, int], Dict[str, Decimal]]:
    """Returns {(source, year, month): {"credits": Decimal, "debits": Decimal, "net": Decimal}}."""
    out: Dict[Tuple[str, int, int], Dict[str, Decimal]] = {}
    for t in transactions:
        key = (t.source, t.date.year, t.date.month)
        if key not in out:
            out[key] = {"credits": Decimal("0.00"), "debits": Decimal("0.00"), "net": Decimal("0.00")}
        if t.amount >= 0:
            out[key]["credits"] += t.amount
        else:
            out[key]["debits"] += t.amount
        out[key]["net"] += t.amount
    return out
