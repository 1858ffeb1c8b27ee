"""Custom exception hierarchy for LLM Labs.

This module defines a small exception hierarchy that enables:
- A clear early exit when configuration is missing
- Consistent wrapping of provider failures
- Validation errors for malformed conversation threads
"""

from typing import Any


class LabsError(Exception):
    """Base exception for all LLM Labs errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(LabsError):
    """Raised when configuration is invalid or missing."""

    pass


class ProviderError(LabsError):
    """Base exception for provider-related errors.

    Provider errors are never retried; they terminate the lab run.
    """

    def __init__(
        self,
        message: str,
        provider: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.provider = provider
        super().__init__(message, {"provider": provider, **(details or {})})


class AuthenticationError(ProviderError):
    """Raised when API authentication fails."""

    pass


class ValidationError(LabsError):
    """Raised when a turn, thread or template input is malformed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(message, {"field": field, "value": value})
