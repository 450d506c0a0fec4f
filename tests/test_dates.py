import unittest
from datetime import date

from statement_extractor.dates import month_from_abbreviation, resolve_transaction_date


class TestResolveTransactionDate(unittest.TestCase):
    def test_january_statement_rolls_december_back(self):
        self.assertEqual(resolve_transaction_date(date(2024, 1, 5), 12, 2), date(2023, 12, 2))
        self.assertEqual(resolve_transaction_date(date(2024, 1, 31), 12, 31), date(2023, 12, 31))

    def test_december_first_stays_in_statement_year(self):
        # Long-standing quirk of the rollover rule, kept on purpose.
        self.assertEqual(resolve_transaction_date(date(2024, 1, 5), 12, 1), date(2024, 12, 1))

    def test_other_months_use_statement_year(self):
        self.assertEqual(resolve_transaction_date(date(2024, 3, 5), 12, 15), date(2024, 12, 15))
        self.assertEqual(resolve_transaction_date(date(2024, 1, 5), 1, 2), date(2024, 1, 2))
        self.assertEqual(resolve_transaction_date(date(2024, 2, 1), 1, 15), date(2024, 1, 15))

    def test_invalid_day_raises(self):
        with self.assertRaises(ValueError):
            resolve_transaction_date(date(2023, 3, 1), 2, 30)


class TestMonthFromAbbreviation(unittest.TestCase):
    def test_known(self):
        self.assertEqual(month_from_abbreviation("Jan"), 1)
        self.assertEqual(month_from_abbreviation("Dec"), 12)

    def test_unknown(self):
        with self.assertRaises(ValueError):
            month_from_abbreviation("January")


if __name__ == "__main__":
    unittest.main()
