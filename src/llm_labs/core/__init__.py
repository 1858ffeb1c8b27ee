"""Core utilities for LLM Labs.

This module exports the fundamental building blocks:
- Configuration management
- Error handling
- Logging
"""

from llm_labs.core.config import MISSING_API_KEY_MESSAGE, Settings, get_settings
from llm_labs.core.errors import (
    AuthenticationError,
    ConfigurationError,
    LabsError,
    ProviderError,
    ValidationError,
)
from llm_labs.core.logging import LogContext, get_logger, log_llm_call, setup_logging

__all__ = [
    # Config
    "MISSING_API_KEY_MESSAGE",
    "Settings",
    "get_settings",
    # Errors
    "AuthenticationError",
    "ConfigurationError",
    "LabsError",
    "ProviderError",
    "ValidationError",
    # Logging
    "LogContext",
    "get_logger",
    "log_llm_call",
    "setup_logging",
]
