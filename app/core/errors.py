"""
Error taxonomy for the resume analyzer.

Every error that can reach an HTTP caller derives from AnalyzerError and
carries the status code and the message that is safe to return.
"""
from typing import Optional
from fastapi import status


GENERIC_UPSTREAM_MESSAGE = "Failed to process PDF. Please try again later."


class ConfigError(RuntimeError):
    """Raised at startup when required configuration is missing or invalid."""


class AnalyzerError(Exception):
    """Base class for errors rendered as the failure envelope."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    # Client errors are always returned verbatim; upstream ones may be masked
    is_client_error: bool = False

    def __init__(self, message: Optional[str] = None):
        self.message = message or "Unknown error"
        super().__init__(self.message)

    @property
    def public_message(self) -> str:
        return self.message


# ============================================
# Client input errors
# ============================================

class MissingFileError(AnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    is_client_error = True

    def __init__(self):
        super().__init__("PDF file is required")


class UnsupportedFileTypeError(AnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    is_client_error = True

    def __init__(self, content_type: Optional[str] = None):
        self.content_type = content_type
        super().__init__("Only PDF files are supported.")


class InsufficientTextError(AnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    is_client_error = True

    def __init__(self):
        super().__init__("Could not extract enough text from the PDF.")


class UploadTooLargeError(AnalyzerError):
    status_code = status.HTTP_413_CONTENT_TOO_LARGE
    is_client_error = True

    def __init__(self, max_bytes: int):
        self.max_bytes = max_bytes
        max_mb = max_bytes / (1024 * 1024)
        super().__init__(f"File size must be less than {max_mb:g} MB")


# ============================================
# Upstream errors
# ============================================

class UpstreamError(AnalyzerError):
    """A dependency failed while processing an otherwise valid upload."""

    @property
    def public_message(self) -> str:
        return f"Failed to process PDF: {self.message}"


class PdfParseError(UpstreamError):
    """The PDF parser could not read the upload."""


class AIServiceError(UpstreamError):
    """The generative-AI call failed."""


class MalformedAIResponseError(AnalyzerError):
    """The AI service answered, but not with a valid AnalysisResult."""

    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        super().__init__("AI service returned malformed data")
