"""Public API surface for sm_common."""

from sm_common.errors import (
    ConfigurationError,
    OptionSourceError,
    SMError,
    UnsupportedIntentError,
    error_to_payload,
)
from sm_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "ConfigurationError",
    "OptionSourceError",
    "SMError",
    "UnsupportedIntentError",
    "error_to_payload",
]
