"""Unit tests for the ``factory_muffin`` pytest fixture."""

from __future__ import annotations

import pytest

from factory_muffin import FactoryMuffin

# ---------------------------------------------------------------------------
# Import the fixture so pytest recognises it in this module
# ---------------------------------------------------------------------------
from factory_muffin.testing.fixtures import factory_muffin  # noqa: F401

DELETED: list[object] = []


class Account:
    def save(self) -> bool:
        return True

    def delete(self) -> bool:
        DELETED.append(self)
        return True


class TestFactoryMuffinFixture:
    def test_returns_engine(self, factory_muffin: FactoryMuffin) -> None:
        assert isinstance(factory_muffin, FactoryMuffin)
        assert factory_muffin.saved() == []

    def test_creates_objects(self, factory_muffin: FactoryMuffin) -> None:
        factory_muffin.register_model(Account).define("Account", {"email": "email"})
        account = factory_muffin.create("Account")
        assert "@" in account.email
        assert factory_muffin.is_saved(account)

    def test_previous_test_objects_were_deleted(self) -> None:
        # runs after test_creates_objects; the fixture teardown deleted its account
        assert len(DELETED) == 1
        assert isinstance(DELETED[0], Account)


@pytest.fixture
def fresh(factory_muffin: FactoryMuffin) -> FactoryMuffin:
    return factory_muffin


def test_fixture_is_shared_within_a_test(factory_muffin: FactoryMuffin, fresh: FactoryMuffin) -> None:
    assert fresh is factory_muffin
    assert len(factory_muffin.registry) == 0
