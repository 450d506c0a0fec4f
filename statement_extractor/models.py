from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List


@dataclass(frozen=True)
class PositionedToken:
    """A single text fragment from a PDF page with its starting position.

    ``y`` grows upward from the bottom of the page, so the first line on a
    page carries the largest ``y``.
    """

    text: str
    x: float
    y: float


@dataclass
class TransactionRecord:
    source: str                  # e.g., "chase_credit_card"
    date: date
    name: str                    # merchant name, continuation lines appended
    amount: Decimal              # signed; withdrawals are negative


@dataclass
class StatementRecord:
    """All transactions found in one statement document."""

    source: str
    statement_period: date       # derived from the filename
    transactions: List[TransactionRecord] = field(default_factory=list)
