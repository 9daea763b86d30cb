"""Lifecycle tracker – saves created objects and tears them down."""
from __future__ import annotations

from typing import Any, Iterator

from factory_muffin.errors import (
    DeleteFailedError,
    DeleteMethodNotFoundError,
    DeletingFailedError,
    SaveFailedError,
    SaveMethodNotFoundError,
)
from factory_muffin.observability.logging import get_logger

logger = get_logger(__name__)

__all__ = ["LifecycleTracker"]


class LifecycleTracker:
    """Records created objects by identity and runs the save/delete conventions.

    The conventions are plain method names looked up on each object when
    they are needed, so one engine can track objects of unrelated types.
    """

    def __init__(self, save_method: str = "save", delete_method: str = "delete") -> None:
        self.save_method = save_method
        self.delete_method = delete_method
        self._saved: list[Any] = []

    # ------------------------------------------------------------------
    # Tracking
    # ------------------------------------------------------------------

    def track(self, obj: Any) -> None:
        if not self.is_saved(obj):
            self._saved.append(obj)

    def is_saved(self, obj: Any) -> bool:
        return any(saved is obj for saved in self._saved)

    def saved(self) -> list[Any]:
        return list(self._saved)

    def __len__(self) -> int:
        return len(self._saved)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._saved))

    # ------------------------------------------------------------------
    # Conventions
    # ------------------------------------------------------------------

    def save(self, obj: Any, model_id: str) -> None:
        """Run the save convention on *obj*.

        Raises
        ------
        SaveMethodNotFoundError
            The object has no callable ``save_method``.
        SaveFailedError
            The method returned a falsy value or raised, or the object
            exposes non-empty ``validation_errors``.
        """
        method = getattr(obj, self.save_method, None)
        if not callable(method):
            raise SaveMethodNotFoundError(obj, self.save_method)

        try:
            result = method()
        except Exception as exc:
            logger.warning("object.save_failed", model=model_id, error=repr(exc))
            raise SaveFailedError(model_id, getattr(obj, "validation_errors", None), cause=exc) from exc

        errors = getattr(obj, "validation_errors", None)
        if not result or errors:
            logger.warning("object.save_failed", model=model_id, validation_errors=errors)
            raise SaveFailedError(model_id, errors or None)
        logger.debug("object.saved", model=model_id)

    def delete(self, obj: Any) -> None:
        """Run the delete convention on *obj*."""
        method = getattr(obj, self.delete_method, None)
        if not callable(method):
            raise DeleteMethodNotFoundError(obj, self.delete_method)
        if not method():
            raise DeleteFailedError(type(obj).__name__)

    def delete_saved(self) -> None:
        """Delete every tracked object, then forget all of them.

        Every object is attempted even when earlier ones fail.  Failures are
        raised together as one :class:`DeletingFailedError` after the sweep.
        """
        errors: list[Exception] = []
        for obj in self._saved:
            try:
                self.delete(obj)
            except Exception as exc:  # noqa: BLE001 - collected and re-raised below
                logger.warning("teardown.delete_failed", model=type(obj).__name__, error=repr(exc))
                errors.append(exc)

        count = len(self._saved)
        self._saved = []
        logger.debug("teardown.completed", attempted=count, failed=len(errors))

        if errors:
            raise DeletingFailedError(errors)
