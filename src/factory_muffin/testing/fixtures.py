"""Testing fixtures – ``factory_muffin`` engine fixture.

Enable in ``conftest.py``::

    pytest_plugins = ["factory_muffin.testing.fixtures"]

Register definitions in a ``factory_definitions`` fixture of your own, or
point ``FACTORY_MUFFIN_FACTORY_PATHS`` at a directory of definition files.
"""
from __future__ import annotations

from typing import Iterator

import pytest

from factory_muffin.factory import FactoryMuffin


@pytest.fixture
def factory_muffin() -> Iterator[FactoryMuffin]:
    """Pytest fixture: a fresh engine whose created objects are deleted after
    the test."""
    engine = FactoryMuffin.from_settings()
    yield engine
    engine.delete_saved()


__all__ = ["factory_muffin"]
