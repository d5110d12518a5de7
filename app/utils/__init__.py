"""Utility helpers for reusable functionality."""

from .datetime import (
    combine_in_app_timezone,
    ensure_app_timezone,
    get_app_timezone,
    now_in_app_timezone,
    parse_iso_datetime,
)

__all__ = [
    "combine_in_app_timezone",
    "ensure_app_timezone",
    "get_app_timezone",
    "now_in_app_timezone",
    "parse_iso_datetime",
]
