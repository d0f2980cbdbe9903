"""Custom exceptions for the TCO calculator."""

from typing import Any, Dict, Optional


class NacTcoError(Exception):
    """
    Base exception for the TCO calculator.

    Attributes:
        message: Human-readable description; defaults to the first docstring line.
        context: Extra key/value payload included in the API error body.
        error_code: Machine-readable code identifying the error type.
        status_code: HTTP status the API answers with.
    """
    error_code: str = "nac_tco_error"
    status_code: int = 500

    def __init__(self, message: Optional[str] = None, **context: Any):
        doc_lines = (self.__class__.__doc__ or "").strip().splitlines()
        self.message = message or (doc_lines[0] if doc_lines else self.error_code)
        self.context = context
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error_code, "detail": self.message, **self.context}


class ReferenceDataNotFoundError(NacTcoError, KeyError):
    "Raised when a vendor, size band, industry, feature or metric key is not in the reference data."
    error_code = "reference_data_not_found"
    status_code = 404

    def __init__(self, kind: str, key: str):
        super().__init__(f"Unknown {kind}: {key!r}", kind=kind, key=key)

    @property
    def kind(self) -> str:
        return self.context["kind"]

    @property
    def key(self) -> str:
        return self.context["key"]
