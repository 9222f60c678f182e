"""Shared pytest fixtures for prattcalc tests."""

import pytest

from prattcalc.core.errors import Diagnostic


@pytest.fixture
def recorded() -> list[Diagnostic]:
    """Collects diagnostics when passed as a sink via ``recorded.append``."""
    return []
