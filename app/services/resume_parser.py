import logging

import fitz  # pymupdf

from app.core.errors import PdfParseError

logger = logging.getLogger(__name__)


def extract_text_from_pdf(data: bytes) -> str:
    """Return the text of every page of an in-memory PDF, in page order."""
    text = ""
    try:
        with fitz.open(stream=data, filetype="pdf") as doc:
            # PyMuPDF sniffs the content and will open images and other formats
            if not doc.is_pdf:
                raise PdfParseError("File is not a valid PDF")
            for page in doc:
                text += page.get_text()
    except PdfParseError:
        logger.warning("PDF parsing failed: upload is not a PDF document")
        raise
    except Exception as e:
        logger.warning(f"PDF parsing failed: {type(e).__name__}: {e}")
        raise PdfParseError(str(e) or type(e).__name__) from e

    return text
