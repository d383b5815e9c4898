# app/core/exceptions.py

from enum import Enum
from typing import Optional, Dict, Any

class ErrorCode(Enum):
    """Standardized error codes for the application."""

    # Upload errors
    NO_FILE_UPLOADED = "NO_FILE_UPLOADED"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    STORAGE_FAILED = "STORAGE_FAILED"

    # Presign errors
    MISSING_KEY = "MISSING_KEY"
    PRESIGN_FAILED = "PRESIGN_FAILED"

    # Order errors
    ORDER_PROCESSING_FAILED = "ORDER_PROCESSING_FAILED"

    # System errors
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


# HTTP status per error code
STATUS_CODES: Dict[ErrorCode, int] = {
    ErrorCode.NO_FILE_UPLOADED: 400,
    ErrorCode.FILE_TOO_LARGE: 413,
    ErrorCode.STORAGE_FAILED: 500,
    ErrorCode.MISSING_KEY: 400,
    ErrorCode.PRESIGN_FAILED: 500,
    ErrorCode.ORDER_PROCESSING_FAILED: 500,
    ErrorCode.INTERNAL_SERVER_ERROR: 500,
}

class PrintQuoteError(Exception):
    """Base exception for all PrintQuote application errors."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        technical_details: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.user_message = user_message
        self.technical_details = technical_details
        self.context = context or {}

        super().__init__(self.user_message)

    @property
    def status_code(self) -> int:
        return STATUS_CODES.get(self.code, 400)

    def to_response(self) -> Dict[str, Any]:
        """Convert to API response format. Only the user message is exposed."""
        return {"error": self.user_message}

class UploadError(PrintQuoteError):
    """Error raised while receiving or storing an uploaded model."""

    def __init__(
        self,
        code: ErrorCode,
        user_message: str,
        filename: Optional[str] = None,
        technical_details: Optional[str] = None
    ):
        context = {}
        if filename:
            context["filename"] = filename

        super().__init__(code, user_message, technical_details, context)

class PresignError(PrintQuoteError):
    """Error raised while producing a presigned download URL."""

class OrderProcessingError(PrintQuoteError):
    """Error raised while quoting or persisting an order."""

    def __init__(self, technical_details: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(
            code=ErrorCode.ORDER_PROCESSING_FAILED,
            user_message="Server error",
            technical_details=technical_details,
            context=context,
        )

    def to_response(self) -> Dict[str, Any]:
        return {"success": False, "error": self.user_message}

# Convenience functions for common errors
def raise_no_file():
    """Raise the missing upload error."""
    raise UploadError(ErrorCode.NO_FILE_UPLOADED, "No file uploaded")

def raise_file_too_large(filename: str, limit_bytes: int):
    """Raise the upload size limit error."""
    raise UploadError(
        ErrorCode.FILE_TOO_LARGE,
        "File too large",
        filename=filename,
        technical_details=f"Upload exceeds {limit_bytes} bytes",
    )

def raise_missing_key():
    """Raise the missing presign key error."""
    raise PresignError(ErrorCode.MISSING_KEY, "Missing key")
