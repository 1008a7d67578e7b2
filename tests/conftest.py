"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "synthetic"

SAMPLE_TEXT = (
    "TY  - ELEC\n"
    "AU  - Chesak,Adam\n"
    "PY  - 2015/09//\n"
    "TI  - Nim RIS module documentation\n"
    "KW  - Nim\n"
    "KW  - RIS\n"
    "KW  - module\n"
    "UR  - https://github.com/achesak/nim-ris\n"
    "N1  - this is a sample citation file\n"
    "Y2  - 2015/09/28/\n"
    "ER  -\n"
)


@pytest.fixture
def sample_text() -> str:
    """Documented single-citation example."""
    return SAMPLE_TEXT


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to synthetic fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def make_ris() -> Callable[..., str]:
    """Factory for framed RIS text with minimal boilerplate.

    Body lines are given as (tag, value) pairs and wrapped between a
    ``TY`` line and an ``ER`` line.
    """

    def _factory(*body: tuple[str, str], ref_type: str = "JOUR", end: str = "ER  -") -> str:
        lines = [f"TY  - {ref_type}"]
        lines.extend(f"{tag}  - {value}" for tag, value in body)
        lines.append(end)
        return "\n".join(lines) + "\n"

    return _factory
