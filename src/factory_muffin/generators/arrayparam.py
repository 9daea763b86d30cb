"""Generators – ``arrayparam`` composite literal lists.

Grammar::

    arrayparam|<delimiter>|<segment>[;<segment>...]

Segments are separated by ``;``.  A segment containing the delimiter is
split by it into a nested list; any other segment stays a plain string::

    >>> ArrayParam.parse("arrayparam|,|a,b;c").values()
    [['a', 'b'], 'c']

A lone segment is the list itself::

    >>> ArrayParam.parse("arrayparam|,|1,2,3").values()
    ['1', '2', '3']
"""
from __future__ import annotations

import dataclasses
from typing import Any, Union

from factory_muffin.errors import MalformedDescriptorError
from factory_muffin.generators.base import GenerationContext, Generator

Segment = Union[str, tuple[str, ...]]


@dataclasses.dataclass(frozen=True)
class ArrayParam(Generator):
    """A list of scalar strings and nested string lists.

    An empty delimiter disables nested splitting.
    """

    PREFIX = "arrayparam|"
    SEPARATOR = ";"

    delimiter: str
    segments: tuple[Segment, ...]

    @classmethod
    def parse(cls, kind: str) -> "ArrayParam":
        if not isinstance(kind, str) or not kind.startswith(cls.PREFIX):
            raise MalformedDescriptorError(
                str(kind),
                f"the arrayparam generator requires the prefix {cls.PREFIX!r}",
            )
        delimiter, _, body = kind[len(cls.PREFIX):].partition("|")
        if not body:
            return cls(delimiter, ())

        segments: list[Segment] = []
        for segment in body.split(cls.SEPARATOR):
            if delimiter and delimiter in segment:
                segments.append(tuple(segment.split(delimiter)))
            else:
                segments.append(segment)
        if len(segments) == 1 and isinstance(segments[0], tuple):
            return cls(delimiter, segments[0])
        return cls(delimiter, tuple(segments))

    def values(self) -> list[Any]:
        """Return a fresh list; callers may mutate it freely."""
        return [list(s) if isinstance(s, tuple) else s for s in self.segments]

    def generate(self, context: GenerationContext) -> list[Any]:
        return self.values()


__all__ = ["ArrayParam"]
