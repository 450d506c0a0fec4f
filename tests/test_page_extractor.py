import tempfile
import unittest
from pathlib import Path

import pypdfium2 as pdfium

from statement_extractor.lines import page_marker
from statement_extractor.page_extractor import iter_page_tokens, read_statement_lines


def blank_pdf(path: Path, pages: int = 1) -> None:
    doc = pdfium.PdfDocument.new()
    for _ in range(pages):
        doc.new_page(612, 792)
    doc.save(str(path))


class TestPageExtractor(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.pdf = Path(self._tmp.name) / "20240201-statement.pdf"
        blank_pdf(self.pdf, pages=2)

    def tearDown(self):
        self._tmp.cleanup()

    def test_blank_pages_yield_only_markers(self):
        for decoder in ("pdfplumber", "pdfium"):
            with self.subTest(decoder=decoder):
                lines = read_statement_lines(self.pdf, decoder=decoder)
                self.assertEqual(lines, [page_marker(1), page_marker(2)])

    def test_one_token_list_per_page(self):
        pages = list(iter_page_tokens(self.pdf))
        self.assertEqual(pages, [[], []])

    def test_exclude_fonts(self):
        pages = list(iter_page_tokens(self.pdf, exclude_fonts=["g_d0_f3"]))
        self.assertEqual(len(pages), 2)
        with self.assertRaises(ValueError):
            iter_page_tokens(self.pdf, decoder="pdfium", exclude_fonts=["g_d0_f3"])

    def test_unknown_decoder(self):
        with self.assertRaises(ValueError):
            iter_page_tokens(self.pdf, decoder="ocr")


if __name__ == "__main__":
    unittest.main()
