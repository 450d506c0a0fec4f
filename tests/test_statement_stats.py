import unittest
from datetime import date
from decimal import Decimal

from statement_extractor import (
    EmptyStatementError,
    TransactionRecord,
    assemble_statement,
    source_rollups,
    statement_stats,
)


class TestStatementStats(unittest.TestCase):
    def setUp(self):
        self.transactions = [
            TransactionRecord("chase_credit_card", date(2024, 1, 20), "A", Decimal("100.00")),
            TransactionRecord("chase_credit_card", date(2024, 1, 5), "B", Decimal("-40.00")),
            TransactionRecord("glens_falls_national_bank", date(2024, 2, 1), "C", Decimal("12.50")),
        ]

    def test_statement_stats(self):
        stats = statement_stats(self.transactions)
        self.assertEqual(stats["count"], 3)
        self.assertEqual(stats["oldest"], date(2024, 1, 5))
        self.assertEqual(stats["newest"], date(2024, 2, 1))
        self.assertEqual(stats["total"], Decimal("72.50"))

    def test_assemble_statement(self):
        statement = assemble_statement("chase_credit_card", date(2024, 2, 1), self.transactions[:2])
        self.assertEqual(statement.source, "chase_credit_card")
        self.assertEqual(statement.statement_period, date(2024, 2, 1))
        self.assertEqual(statement.transactions, self.transactions[:2])

    def test_assemble_empty_statement(self):
        with self.assertRaises(EmptyStatementError):
            assemble_statement("chase_credit_card", date(2024, 2, 1), [])

    def test_source_rollups(self):
        roll = source_rollups(self.transactions)
        jan = roll[("chase_credit_card", 2024, 1)]
        self.assertEqual(jan["credits"], Decimal("100.00"))
        self.assertEqual(jan["debits"], Decimal("-40.00"))
        self.assertEqual(jan["net"], Decimal("60.00"))
        self.assertEqual(roll[("glens_falls_national_bank", 2024, 2)]["net"], Decimal("12.50"))


if __name__ == "__main__":
    unittest.main()
