"""Fatal statement parsing errors.

None of these are recovered from: a statement that fails to parse must not be
reported with missing transactions.
"""


class StatementParseError(ValueError):
    """Base class for every fatal error raised while parsing a statement."""


class FilenameDateParseError(StatementParseError):
    """The filename does not carry the institution's statement date pattern."""


class StatementPeriodMismatchError(StatementParseError):
    """The statement period printed in the document disagrees with the filename."""


class UnresolvedTransactionDateError(StatementParseError):
    """A transaction or continuation line came before any transaction date."""


class UnexpectedSeparatorWidthError(StatementParseError):
    """The gap before an amount does not match a known debit/credit column."""


class EmptyStatementError(StatementParseError):
    """The scan finished without a single transaction."""
