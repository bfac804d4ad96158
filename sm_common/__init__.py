"""Shared helpers for searchable-multiselect."""

from sm_common.api import SMError, configure_logging

__all__ = ["configure_logging", "SMError"]
