"""Common utility functions for risparse."""

from risparse.utils.hashing import (
    calculate_json_sha256,
    calculate_string_sha256,
    format_sha256,
)
from risparse.utils.timestamps import get_iso_timestamp

__all__ = [
    "get_iso_timestamp",
    "calculate_json_sha256",
    "calculate_string_sha256",
    "format_sha256",
]
