"""Generators – kind descriptor detection.

A kind is turned into a :class:`Generator` once, when it is defined:

* a :class:`Generator` is used as-is;
* a function or other non-class callable becomes :class:`Lazy`;
* any other non-string value becomes :class:`Literal`;
* ``arrayparam|...`` becomes :class:`ArrayParam`;
* ``factory|<model>`` becomes :class:`ModelRef`;
* every other string becomes :class:`ProviderCall`.
"""
from __future__ import annotations

from typing import Any, Callable

from factory_muffin.errors import MalformedDescriptorError
from factory_muffin.generators.arrayparam import ArrayParam
from factory_muffin.generators.base import Generator
from factory_muffin.generators.literal import Lazy, Literal
from factory_muffin.generators.model_ref import ModelRef
from factory_muffin.generators.provider import ProviderCall

_TAGGED: dict[str, Callable[[str], Generator]] = {
    "arrayparam": ArrayParam.parse,
    "factory": ModelRef.parse,
}


def parse_kind(kind: Any) -> Generator:
    """Parse *kind* into a reusable generator.

    Raises
    ------
    MalformedDescriptorError
        When a string kind is empty or a tagged kind is malformed.
    """
    if isinstance(kind, Generator):
        return kind
    if not isinstance(kind, str):
        if callable(kind) and not isinstance(kind, type):
            return Lazy(kind)
        return Literal(kind)
    if not kind.strip():
        raise MalformedDescriptorError(kind, "empty kind")

    tag = kind.split("|", 1)[0]
    parser = _TAGGED.get(tag)
    if parser is not None:
        return parser(kind)
    return ProviderCall.parse(kind)


def parse_definition(definition: dict[str, Any]) -> dict[str, Generator]:
    """Parse every kind of a definition, keeping attribute order."""
    return {name: parse_kind(kind) for name, kind in definition.items()}


__all__ = ["parse_definition", "parse_kind"]
