"""
Tests for PDF text extraction.
"""
import fitz  # pymupdf
import pytest

from app.core.errors import PdfParseError
from app.services.resume_parser import extract_text_from_pdf
from helpers import RESUME_TEXT, make_pdf


def test_extracts_text_from_pdf():
    text = extract_text_from_pdf(make_pdf(RESUME_TEXT))

    assert "Jane Doe" in text
    assert "PostgreSQL" in text
    assert len(text.strip()) >= 50


def test_extracts_pages_in_order():
    doc = fitz.open()
    for label in ["First page content", "Second page content"]:
        page = doc.new_page()
        page.insert_text((72, 72), label)
    data = doc.tobytes()
    doc.close()

    text = extract_text_from_pdf(data)
    assert text.index("First page") < text.index("Second page")


def test_blank_pdf_yields_no_text():
    assert extract_text_from_pdf(make_pdf("")).strip() == ""


def test_invalid_bytes_raise_parse_error():
    with pytest.raises(PdfParseError):
        extract_text_from_pdf(b"GIF89a not a pdf")


def test_image_bytes_are_not_treated_as_pdf():
    """Formats PyMuPDF can open but that are not PDFs are refused."""
    with pytest.raises(PdfParseError) as exc_info:
        extract_text_from_pdf(b"GIF89a not a pdf")
    assert exc_info.value.message == "File is not a valid PDF"
    assert exc_info.value.__cause__ is None
