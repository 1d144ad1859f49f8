"""
Sequential composition
======================

compose(lhs, rhs) focuses rhs's part inside lhs's part:

    Lens[A, B] x Lens[B, C] -> Lens[A, C]

Infix form: lhs >> rhs (left-associative, associative in value).
"""

from __future__ import annotations

import typing

from .lens import Lens


def _joined_name(lhs: Lens[typing.Any, typing.Any], rhs: Lens[typing.Any, typing.Any], template: str) -> str | None:
    if lhs.name is None or rhs.name is None:
        return None
    return template.format(lhs.name, rhs.name)


def compose[A, B, C](lhs: Lens[A, B], rhs: Lens[B, C], /) -> Lens[A, C]:
    """
    Compose two lenses into one that reaches through both.

    get(a)    = rhs.get(lhs.get(a))
    set(c, a) = lhs.set(rhs.set(c, lhs.get(a)), a)

    The updated B is computed from the current B of a before it is pushed
    back through lhs.set. lhs and rhs are only read and stay reusable.
    """

    def get(whole: A) -> C:
        return rhs.get(lhs.get(whole))

    def set_(part: C, whole: A) -> A:
        return lhs.set(rhs.set(part, lhs.get(whole)), whole)

    return Lens(get, set_, name=_joined_name(lhs, rhs, "{} >> {}"))


def _identity_get[W](whole: W) -> W:
    return whole


def _identity_set[W](part: W, whole: W) -> W:
    _ = whole
    return part


def identity[W]() -> Lens[W, W]:
    """
    Lens focusing the whole itself. Neutral element of compose:

        identity() >> l  ~  l  ~  l >> identity()
    """
    return Lens(_identity_get, _identity_set, name="identity")


def compose_all(*lenses: Lens[typing.Any, typing.Any]) -> Lens[typing.Any, typing.Any]:
    """
    Left fold of compose: compose_all(a, b, c) == (a >> b) >> c.

    Raises ValueError when called with nothing to compose.
    """
    if not lenses:
        raise ValueError("compose_all needs at least one lens")
    first, *rest = lenses
    result = first
    for lens in rest:
        result = compose(result, lens)
    return result


__all__ = ("compose", "compose_all", "identity")
