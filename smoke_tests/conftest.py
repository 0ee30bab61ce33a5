"""Shared fixtures for smoke tests run against the buneary source tree."""

from pathlib import Path

import pytest

PACKAGE_DIR = Path(__file__).resolve().parent.parent / "src" / "buneary"


@pytest.fixture
def package_dir() -> Path:
    """Return the buneary package directory."""
    return PACKAGE_DIR


@pytest.fixture
def source_files(package_dir: Path) -> list[Path]:
    """Return the package's non-test source files."""
    return sorted(
        path for path in package_dir.rglob("*.py") if not path.name.endswith("_test.py")
    )
