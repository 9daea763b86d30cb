"""Lifecycle errors: saving and tearing down tracked objects."""

from __future__ import annotations

from typing import Any, Sequence

from factory_muffin.errors.base import FactoryMuffinError


class LifecycleError(FactoryMuffinError):
    """Raised when a created object cannot be saved or deleted."""

    default_code = "lifecycle_error"


class _MethodNotFoundError(LifecycleError):
    _action = "method"

    def __init__(self, obj: object, method: str, **kwargs: Any) -> None:
        model = type(obj).__name__
        super().__init__(
            f"The {self._action} method '{method}' was not found on the model of type '{model}'",
            detail={"model": model, "method": method},
            **kwargs,
        )
        self.object = obj
        self.model = model
        self.method = method


class SaveMethodNotFoundError(_MethodNotFoundError):
    """The object has no callable attribute named like the save convention."""

    default_code = "save_method_not_found"
    _action = "save"


class DeleteMethodNotFoundError(_MethodNotFoundError):
    """The object has no callable attribute named like the delete convention."""

    default_code = "delete_method_not_found"
    _action = "delete"


class SaveFailedError(LifecycleError):
    """The save convention reported failure or validation errors are present.

    ``validation_errors`` holds whatever the object exposed, or ``None``.
    """

    default_code = "save_failed"

    def __init__(
        self,
        model: str,
        validation_errors: Any = None,
        **kwargs: Any,
    ) -> None:
        message = f"We could not save the model of type '{model}'"
        if validation_errors:
            message = f"{message}: {validation_errors}"
        super().__init__(
            message,
            detail={"model": model, "validation_errors": validation_errors},
            **kwargs,
        )
        self.model = model
        self.validation_errors = validation_errors


class DeleteFailedError(LifecycleError):
    """The delete convention returned a falsy result for one object."""

    default_code = "delete_failed"

    def __init__(self, model: str, **kwargs: Any) -> None:
        super().__init__(
            f"We could not delete the model of type '{model}'",
            detail={"model": model},
            **kwargs,
        )
        self.model = model


class DeletingFailedError(LifecycleError):
    """Aggregate of every failure collected during one teardown sweep."""

    default_code = "deleting_failed"

    def __init__(self, exceptions: Sequence[BaseException], **kwargs: Any) -> None:
        count = len(exceptions)
        noun = "problem" if count == 1 else "problems"
        super().__init__(
            f"We encountered {count} {noun} while trying to delete the saved models",
            detail={"errors": [repr(exc) for exc in exceptions]},
            **kwargs,
        )
        self.exceptions: list[BaseException] = list(exceptions)


__all__ = [
    "DeleteFailedError",
    "DeleteMethodNotFoundError",
    "DeletingFailedError",
    "LifecycleError",
    "SaveFailedError",
    "SaveMethodNotFoundError",
]
