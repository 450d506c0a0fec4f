from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Sequence

import pdfplumber
import pypdfium2 as pdfium

from .lines import reconstruct_lines
from .models import PositionedToken

logger = logging.getLogger(__name__)

DECODERS = ("pdfplumber", "pdfium")


def _plumber_pages(pdf_path: Path, exclude_fonts: Sequence[str]) -> Iterator[List[PositionedToken]]:
    logging.getLogger("pdfminer").setLevel(logging.ERROR)
    with pdfplumber.open(pdf_path) as pdf:
        for page in pdf.pages:
            if exclude_fonts:
                page = page.filter(
                    lambda obj: obj.get("object_type") != "char"
                    or not any(f in obj.get("fontname", "") for f in exclude_fonts)
                )
            words = page.extract_words(keep_blank_chars=True, use_text_flow=True)
            yield [
                PositionedToken(text=w["text"], x=float(w["x0"]), y=float(page.height - w["bottom"]))
                for w in words
            ]


def _pdfium_pages(pdf_path: Path) -> Iterator[List[PositionedToken]]:
    """Yield pdfium text runs, one token per text rectangle."""
    pdf = pdfium.PdfDocument(str(pdf_path))
    try:
        for i in range(len(pdf)):
            page = pdf[i]
            textpage = page.get_textpage()
            tokens: List[PositionedToken] = []
            for r in range(textpage.count_rects()):
                left, bottom, right, top = textpage.get_rect(r)
                text = textpage.get_text_bounded(left, bottom, right, top)
                if text:
                    tokens.append(PositionedToken(text=text, x=float(left), y=float(bottom)))
            textpage.close()
            page.close()
            yield tokens
    finally:
        pdf.close()


def iter_page_tokens(
    pdf_path: Path,
    decoder: str = "pdfplumber",
    exclude_fonts: Sequence[str] = (),
) -> Iterator[List[PositionedToken]]:
    """Yield the positioned text fragments of each page, in page order.

    ``exclude_fonts`` drops characters whose font name contains any of the
    given substrings (pdfplumber only).
    """
    pdf_path = Path(pdf_path)
    if decoder == "pdfplumber":
        return _plumber_pages(pdf_path, tuple(exclude_fonts))
    if decoder == "pdfium":
        if exclude_fonts:
            raise ValueError("exclude_fonts is only supported by the pdfplumber decoder")
        return _pdfium_pages(pdf_path)
    raise ValueError(f"Unknown decoder {decoder!r}; expected one of {', '.join(DECODERS)}")


def read_statement_lines(
    pdf_path: Path,
    decoder: str = "pdfplumber",
    exclude_fonts: Sequence[str] = (),
) -> List[str]:
    """Decode a statement PDF into reconstructed lines with page markers."""
    logger.debug("Reading PDF file: %s", pdf_path)
    return reconstruct_lines(iter_page_tokens(pdf_path, decoder, exclude_fonts))
