"""
Leaf lens constructors
======================

Ready-made lenses for the usual immutable Python values:

- attr(name)  - field of a frozen dataclass or NamedTuple
- item(key)   - key of a mapping (set returns a new dict)
- index(i)    - position in a tuple (set returns a new tuple)

Hand-written Lens(get, set) remains the way to focus anything else.
"""

from __future__ import annotations

import dataclasses
import typing
from collections.abc import Mapping

from .lens import Lens


def attr[W](name: str, /) -> Lens[W, typing.Any]:
    """
    Focus attribute `name`.

    set rebuilds the whole with dataclasses.replace (dataclass instances)
    or _replace (NamedTuple). Anything else raises TypeError on set.
    """

    def get(whole: W) -> typing.Any:
        return getattr(whole, name)

    def set_(part: typing.Any, whole: W) -> W:
        if dataclasses.is_dataclass(whole) and not isinstance(whole, type):
            return dataclasses.replace(whole, **{name: part})
        if isinstance(whole, tuple) and hasattr(whole, "_replace"):
            return whole._replace(**{name: part})
        raise TypeError(
            f"attr({name!r}) cannot rebuild {type(whole).__name__}; "
            "use a dataclass or NamedTuple, or write the Lens by hand"
        )

    return Lens(get, set_, name=name)


def item[K, V](key: K, /) -> Lens[Mapping[K, V], V]:
    """
    Focus `key` of a mapping.

    set always returns a new plain dict, whatever Mapping it was given
    (a MappingProxyType comes back as a dict). The original is left alone.
    """

    def get(whole: Mapping[K, V]) -> V:
        return whole[key]

    def set_(part: V, whole: Mapping[K, V]) -> dict[K, V]:
        result = dict(whole)
        result[key] = part
        return result

    return Lens(get, set_, name=f"[{key!r}]")


def index[T](position: int, /) -> Lens[tuple[T, ...], T]:
    """
    Focus one position of a tuple. Negative positions count from the end.

    NamedTuples keep their type on set.
    """

    def get(whole: tuple[T, ...]) -> T:
        return whole[position]

    def set_(part: T, whole: tuple[T, ...]) -> tuple[T, ...]:
        at = position if position >= 0 else len(whole) + position
        if not 0 <= at < len(whole):
            raise IndexError(f"index({position}) out of range for tuple of length {len(whole)}")
        items = whole[:at] + (part,) + whole[at + 1:]
        if hasattr(whole, "_make"):
            return type(whole)._make(items)
        return items

    return Lens(get, set_, name=f"[{position}]")


__all__ = ("attr", "item", "index")
