"""
Parallel composition
====================

zip_(lhs, rhs) views two sibling parts of one whole as a pair:

    Lens[A, B] x Lens[A, C] -> Lens[A, tuple[B, C]]

Infix form: lhs & rhs.

NOTE: lhs и rhs должны смотреть на непересекающиеся поля.
      Это не проверяется; перекрытие ломает SetSet.
"""

from __future__ import annotations

import typing

from .lens import Lens


def zip_[A, B, C](lhs: Lens[A, B], rhs: Lens[A, C], /) -> Lens[A, tuple[B, C]]:
    """
    Pair two lenses over the same whole.

    get(a)         = (lhs.get(a), rhs.get(a))
    set((b, c), a) = rhs.set(c, lhs.set(b, a))

    rhs is applied to the whole already updated by lhs, so both updates
    survive.
    """

    def get(whole: A) -> tuple[B, C]:
        return (lhs.get(whole), rhs.get(whole))

    def set_(parts: tuple[B, C], whole: A) -> A:
        first, second = parts
        return rhs.set(second, lhs.set(first, whole))

    name = None
    if lhs.name is not None and rhs.name is not None:
        name = f"({lhs.name} & {rhs.name})"
    return Lens(get, set_, name=name)


def zip2[A, B, C, D](
    first: Lens[A, B],
    second: Lens[A, C],
    third: Lens[A, D],
    /,
) -> Lens[A, tuple[B, tuple[C, D]]]:
    """Three-way zip, right-nested: zip_(first, zip_(second, third))."""
    return zip_(first, zip_(second, third))


def zip3[A, B, C, D, E](
    first: Lens[A, B],
    second: Lens[A, C],
    third: Lens[A, D],
    fourth: Lens[A, E],
    /,
) -> Lens[A, tuple[B, tuple[C, tuple[D, E]]]]:
    """Four-way zip, right-nested: zip_(first, zip2(second, third, fourth))."""
    return zip_(first, zip2(second, third, fourth))


def zip_all[A](*lenses: Lens[A, typing.Any]) -> Lens[A, tuple[typing.Any, ...]]:
    """
    N-way zip with a flat tuple instead of right-nested pairs.

    Setters run left to right over the running whole, same as zip_.
    A tuple of the wrong length passed to set raises ValueError.
    """
    if len(lenses) < 2:
        raise ValueError("zip_all needs at least two lenses")

    def get(whole: A) -> tuple[typing.Any, ...]:
        return tuple(lens.get(whole) for lens in lenses)

    def set_(parts: tuple[typing.Any, ...], whole: A) -> A:
        if len(parts) != len(lenses):
            raise ValueError(f"zip_all expected {len(lenses)} parts, got {len(parts)}")
        result = whole
        for lens, part in zip(lenses, parts):
            result = lens.set(part, result)
        return result

    return Lens(get, set_)


__all__ = ("zip_", "zip2", "zip3", "zip_all")
