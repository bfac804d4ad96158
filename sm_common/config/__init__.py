"""Configuration helpers for sm_common."""

from .env import parse_bool_env, parse_choice_env, parse_int_env

__all__ = [
    "parse_bool_env",
    "parse_choice_env",
    "parse_int_env",
]
