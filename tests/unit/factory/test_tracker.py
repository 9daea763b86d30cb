"""Unit tests for LifecycleTracker and the teardown sweep."""

from __future__ import annotations

import pytest

from factory_muffin import FactoryMuffin
from factory_muffin.errors import (
    DeleteFailedError,
    DeleteMethodNotFoundError,
    DeletingFailedError,
    SaveFailedError,
    SaveMethodNotFoundError,
)
from factory_muffin.tracker import LifecycleTracker


class Record:
    def __init__(self, delete_result: object = True) -> None:
        self.delete_result = delete_result
        self.deleted = 0

    def save(self) -> bool:
        return True

    def delete(self) -> object:
        self.deleted += 1
        return self.delete_result


class Broken(Record):
    def delete(self) -> object:
        self.deleted += 1
        raise RuntimeError("constraint violation")


class NoDelete:
    def save(self) -> bool:
        return True


class Equalish(Record):
    def __eq__(self, other: object) -> bool:
        return isinstance(other, Equalish)

    __hash__ = None  # type: ignore[assignment]


class TestTracking:
    def test_track_by_identity(self) -> None:
        tracker = LifecycleTracker()
        a, b = Equalish(), Equalish()
        tracker.track(a)
        assert tracker.is_saved(a)
        assert not tracker.is_saved(b)

    def test_track_is_idempotent(self) -> None:
        tracker = LifecycleTracker()
        record = Record()
        tracker.track(record)
        tracker.track(record)
        assert len(tracker) == 1

    def test_saved_returns_copy(self) -> None:
        tracker = LifecycleTracker()
        tracker.track(Record())
        tracker.saved().clear()
        assert len(tracker) == 1

    def test_iteration_order(self) -> None:
        tracker = LifecycleTracker()
        records = [Record(), Record(), Record()]
        for record in records:
            tracker.track(record)
        assert list(tracker) == records


class TestSave:
    def test_save_ok(self) -> None:
        LifecycleTracker().save(Record(), "Record")

    def test_missing_method(self) -> None:
        with pytest.raises(SaveMethodNotFoundError):
            LifecycleTracker(save_method="persist").save(Record(), "Record")

    def test_non_callable_attribute_is_missing(self) -> None:
        record = Record()
        record.persist = "not a method"  # type: ignore[attr-defined]
        with pytest.raises(SaveMethodNotFoundError):
            LifecycleTracker(save_method="persist").save(record, "Record")

    @pytest.mark.parametrize("result", [False, None, 0, ""])
    def test_falsy_result(self, result: object) -> None:
        record = Record()
        record.save = lambda: result  # type: ignore[method-assign]
        with pytest.raises(SaveFailedError):
            LifecycleTracker().save(record, "Record")

    def test_empty_validation_errors_are_ignored(self) -> None:
        record = Record()
        record.validation_errors = []  # type: ignore[attr-defined]
        LifecycleTracker().save(record, "Record")


class TestDeleteSaved:
    def test_deletes_everything_and_clears(self) -> None:
        tracker = LifecycleTracker()
        records = [Record(), Record()]
        for record in records:
            tracker.track(record)
        tracker.delete_saved()
        assert [r.deleted for r in records] == [1, 1]
        assert tracker.saved() == []

    def test_empty_sweep(self) -> None:
        tracker = LifecycleTracker()
        tracker.delete_saved()
        assert tracker.saved() == []

    def test_collects_every_failure_and_never_stops_early(self) -> None:
        tracker = LifecycleTracker()
        ok_before, falsy, broken, missing, ok_after = Record(), Record(False), Broken(), NoDelete(), Record()
        for obj in (ok_before, falsy, broken, missing, ok_after):
            tracker.track(obj)

        with pytest.raises(DeletingFailedError) as info:
            tracker.delete_saved()

        errors = info.value.exceptions
        assert len(errors) == 3
        assert isinstance(errors[0], DeleteFailedError)
        assert errors[0].model == "Record"
        assert isinstance(errors[1], RuntimeError)
        assert isinstance(errors[2], DeleteMethodNotFoundError)
        assert errors[2].method == "delete"
        assert ok_before.deleted == ok_after.deleted == 1
        assert broken.deleted == 1
        assert tracker.saved() == []

    def test_second_sweep_after_failure_is_clean(self) -> None:
        tracker = LifecycleTracker()
        tracker.track(Record(False))
        with pytest.raises(DeletingFailedError):
            tracker.delete_saved()
        tracker.delete_saved()

    def test_custom_delete_method(self) -> None:
        tracker = LifecycleTracker(delete_method="destroy")
        tracker.track(Record())
        with pytest.raises(DeletingFailedError) as info:
            tracker.delete_saved()
        assert info.value.exceptions[0].method == "destroy"  # type: ignore[attr-defined]


class TestEngineTeardown:
    def test_delete_saved_through_engine(self) -> None:
        factory = FactoryMuffin().register_model(Record).define("Record", {"label": "arrayparam|,|a"})
        records = factory.seed(2, "Record")
        assert factory.delete_saved() is factory
        assert [r.deleted for r in records] == [1, 1]
        assert factory.saved() == []

    def test_instances_are_never_deleted(self) -> None:
        factory = FactoryMuffin().register_model(Record).define("Record", {})
        loose = factory.instance("Record")
        factory.create("Record")
        factory.delete_saved()
        assert loose.deleted == 0

    def test_aggregate_error_and_clear(self) -> None:
        factory = FactoryMuffin().register_model(Record).define("Record", {"delete_result": False})
        factory.seed(3, "Record")
        with pytest.raises(DeletingFailedError) as info:
            factory.delete_saved()
        assert len(info.value.exceptions) == 3
        assert factory.saved() == []
