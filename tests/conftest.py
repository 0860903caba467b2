"""Pytest configuration for repository-relative imports and shared units."""

import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from convertit.reference_data import default_registry


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def unit(registry):
    """Look up a reference unit by id, failing loudly on typos."""

    def _get(unit_id):
        found = registry.get_unit(unit_id)
        assert found is not None, f"no reference unit {unit_id!r}"
        return found

    return _get
