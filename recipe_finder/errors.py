from __future__ import annotations


class InputValidationError(Exception):
    """Raised when an upload is rejected before any decode attempt."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DecodeError(Exception):
    """Raised when image bytes cannot be decoded or drawn onto the canvas."""


class CatalogInvariantViolation(Exception):
    """Raised at load time when the recipe catalog is malformed."""
