"""Identifier generation error taxonomy.

Example:
    >>> from aasidgen.errors import IdConfigurationError
    >>> err = IdConfigurationError("Unknown digits mode 'dice'.", field="digits_mode")
    >>> err.code
    'AID001'
"""

from __future__ import annotations

from typing import Any

AID001_CONFIGURATION_INVALID = "AID001"
AID002_ID_SPACE_EXHAUSTED = "AID002"


class IdGenerationError(RuntimeError):
    """Base identifier generation error with a machine-readable code."""

    def __init__(self, code: str, message: str, *, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.code = code
        self.details = dict(details or {})

    def to_dict(self) -> dict[str, Any]:
        """Return serializable error details.

        Example:
            >>> IdGenerationError("AID999", "boom").to_dict()["code"]
            'AID999'
        """
        payload: dict[str, Any] = {"code": self.code, "message": str(self)}
        if self.details:
            payload["details"] = self.details
        return payload


class IdConfigurationError(IdGenerationError, ValueError):
    """Raised when identifier configuration cannot be resolved."""

    def __init__(self, message: str, *, field: str | None = None, value: Any = None):
        details: dict[str, Any] = {}
        if field is not None:
            details["field"] = field
            details["value"] = value
        super().__init__(AID001_CONFIGURATION_INVALID, message, details=details)
        self.field = field


class IdSpaceExhaustedError(IdGenerationError):
    """Raised when a bounded collision probe runs out of attempts."""

    def __init__(self, seed: str, attempts: int):
        super().__init__(
            AID002_ID_SPACE_EXHAUSTED,
            f"No unique identifier found for seed '{seed}' after {attempts} attempts.",
            details={"seed": seed, "attempts": attempts},
        )
        self.seed = seed
        self.attempts = attempts
