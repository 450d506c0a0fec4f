import json
import tempfile
import unittest
from datetime import date
from decimal import Decimal
from pathlib import Path

from openpyxl import load_workbook

from statement_extractor import TransactionRecord, write_csv, write_json, write_lines, write_xlsx


class TestOutputs(unittest.TestCase):
    def setUp(self):
        self.transactions = [
            TransactionRecord("chase_credit_card", date(2024, 1, 15), "COFFEE, SHOP", Decimal("4.5")),
            TransactionRecord("glens_falls_national_bank", date(2024, 1, 5), "ATM", Decimal("-60.00")),
        ]
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_write_csv(self):
        out = self.tmp / "output" / "transactions.csv"
        write_csv(self.transactions, out)
        self.assertEqual(
            out.read_text(encoding="utf-8").splitlines(),
            [
                "Date,Name,Amount,Source",
                '2024/01/15,"COFFEE, SHOP",4.50,chase_credit_card',
                "2024/01/05,ATM,-60.00,glens_falls_national_bank",
            ],
        )

    def test_write_json(self):
        out = self.tmp / "transactions.json"
        write_json(self.transactions, out)
        data = json.loads(out.read_text(encoding="utf-8"))
        self.assertEqual(
            data[0],
            {"source": "chase_credit_card", "date": "2024-01-15", "name": "COFFEE, SHOP", "amount": 4.5},
        )
        self.assertEqual(data[1]["amount"], -60.0)

    def test_write_xlsx(self):
        out = self.tmp / "Personal Finances.xlsx"
        write_xlsx(self.transactions, out)
        ws = load_workbook(out)["Transactions"]
        rows = list(ws.iter_rows(values_only=True))
        self.assertEqual(rows[0], ("Date", "Name", "Amount", "Source"))
        self.assertEqual(rows[1][0].date(), date(2024, 1, 15))
        self.assertEqual(rows[1][1:], ("COFFEE, SHOP", 4.5, "chase_credit_card"))
        self.assertEqual(rows[2][2], -60.0)

    def test_write_lines(self):
        out = self.tmp / "debug.txt"
        write_lines(["__PARSER__ === Page 1 ===", "01/15 COFFEE SHOP 4.50"], out)
        self.assertEqual(out.read_text(encoding="utf-8"), "__PARSER__ === Page 1 ===\n01/15 COFFEE SHOP 4.50")


if __name__ == "__main__":
    unittest.main()
