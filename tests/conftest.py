# tests/conftest.py
"""Pytest configuration and shared fixtures for freqdist tests."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    # Ensure freqdist is importable when running tests from repo root.
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if src_dir.exists() and str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def sample() -> list[float]:
    """Small sample with a known distribution over [0, 3, 6, 9]."""
    return [1, 2, 2, 3, 5, 8]


@pytest.fixture
def boundaries() -> list[float]:
    """Three bins: [0, 3), [3, 6), [6, 9]."""
    return [0, 3, 6, 9]
