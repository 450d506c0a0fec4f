"""Batch parsing of every statement for one institution."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import Path
from typing import Iterable, List, Sequence

from .models import StatementRecord, TransactionRecord
from .parser import StatementParser

logger = logging.getLogger(__name__)


def find_statement_files(folder: Path) -> List[Path]:
    """All PDFs below ``folder``, sorted by path."""
    folder = Path(folder)
    if not folder.is_dir():
        return []
    return sorted(p for p in folder.rglob("*") if p.is_file() and p.suffix.lower() == ".pdf")


def load_statements(
    parser: StatementParser,
    pdf_paths: Sequence[Path],
    workers: int = 1,
    **decoder_options,
) -> List[StatementRecord]:
    """Parse each statement independently, returning results in input order.

    The first failing statement raises; with ``workers > 1`` statements not yet
    started are cancelled.
    """
    parse = partial(parser.parse_pdf, **decoder_options)
    if workers <= 1 or len(pdf_paths) <= 1:
        return [parse(p) for p in pdf_paths]
    pool = ThreadPoolExecutor(max_workers=workers)
    try:
        return list(pool.map(parse, pdf_paths))
    finally:
        pool.shutdown(wait=True, cancel_futures=True)


def merge_transactions(statements: Iterable[StatementRecord]) -> List[TransactionRecord]:
    """Concatenate statement transactions, newest first.

    The sort is stable, so same-day transactions keep statement order.
    """
    transactions: List[TransactionRecord] = []
    for s in statements:
        transactions.extend(s.transactions)
    transactions.sort(key=lambda t: t.date, reverse=True)
    return transactions


def load_transactions(
    parser: StatementParser,
    folder: Path,
    workers: int = 1,
    **decoder_options,
) -> List[TransactionRecord]:
    pdf_paths = find_statement_files(folder)
    logger.info("Found %d %s statements in %s", len(pdf_paths), parser.source, folder)
    statements = load_statements(parser, pdf_paths, workers=workers, **decoder_options)
    return merge_transactions(statements)
