"""
Exceptions for the GST engine

Lookups never raise: unknown categories and states fall back to defaults.
The only error raised by the calculator is for amounts that cannot be
represented as a finite decimal.
"""

from typing import Any, Dict

# =============================================================================
# Module Exports
# =============================================================================
__all__ = [
    "GSTEngineException",
    "InvalidAmountError",
]


class GSTEngineException(Exception):
    """Base exception for the GST engine"""

    def __init__(self, message: str, error_code: str = "INTERNAL_ERROR", details: Dict[str, Any] = None, status_code: int = 500):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)


class InvalidAmountError(GSTEngineException, ValueError):
    """Amount is not a finite number"""

    def __init__(self, field: str, value: Any, details: Dict[str, Any] = None):
        super().__init__(
            f"Invalid amount for '{field}': {value!r}",
            "INVALID_AMOUNT",
            {**(details or {}), "field": field, "value": str(value)},
            400
        )

