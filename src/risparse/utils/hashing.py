"""Hashing utilities for risparse.

Digests identify source texts and parsed citations in audit events.
"""

import hashlib
import json
from typing import Any

__all__ = ["format_sha256", "calculate_string_sha256", "calculate_json_sha256"]


def format_sha256(hex_digest: str) -> str:
    """Format SHA256 hash with standard prefix.

    Parameters
    ----------
    hex_digest : str
        Raw hexadecimal digest.

    Returns
    -------
    str
        Formatted hash with "sha256:" prefix.
    """
    return f"sha256:{hex_digest}"


def calculate_string_sha256(text: str) -> str:
    """Calculate SHA256 hash of string.

    Parameters
    ----------
    text : str
        Input text.

    Returns
    -------
    str
        SHA256 hash with "sha256:" prefix.
    """
    sha256_hash = hashlib.sha256(text.encode("utf-8"))
    return format_sha256(sha256_hash.hexdigest())


def calculate_json_sha256(data: dict[str, Any]) -> str:
    """Calculate SHA256 hash of a JSON-serializable dict.

    Keys are sorted and separators fixed so equal dicts hash equally.

    Parameters
    ----------
    data : dict[str, Any]
        JSON-serializable data.

    Returns
    -------
    str
        SHA256 hash with "sha256:" prefix.
    """
    canonical = json.dumps(data, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
    return calculate_string_sha256(canonical)
