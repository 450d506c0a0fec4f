from .models import PositionedToken, StatementRecord, TransactionRecord
from .errors import (
    EmptyStatementError,
    FilenameDateParseError,
    StatementParseError,
    StatementPeriodMismatchError,
    UnexpectedSeparatorWidthError,
    UnresolvedTransactionDateError,
)
from .lines import reconstruct_lines
from .dates import resolve_transaction_date
from .parser import PARSERS, ChaseParser, GlensFallsParser, StatementParser, get_parser
from .outputs import write_csv, write_json, write_lines, write_xlsx
from .stats import assemble_statement, source_rollups, statement_stats
