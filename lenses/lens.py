"""
Lens
====

A lens is a pair of pure functions focusing one part of an immutable whole:

- get: W -> P
- set: (P, W) -> W

Lens laws (a well-behaved lens satisfies all three):
- GetSet: set(get(w), w) == w
- SetGet: get(set(p, w)) == p
- SetSet: set(p2, set(p1, w)) == set(p2, w)

The laws are a contract, not something checked at construction.
Use lenses.laws to probe a concrete lens.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ._types import Endo, Getter, Setter


@dataclass(frozen=True, slots=True, repr=False)
class Lens[W, P]:
    """
    Immutable getter/setter pair over a whole W focusing a part P.

    Example:
        city = Lens[Address, str](
            get=lambda a: a.city,
            set=lambda city, a: replace(a, city=city),
        )
        city.get(address)           # "NY"
        city.set("Turin", address)  # new Address, address untouched

    Infix sugar:
        lhs >> rhs   - sequential composition, same as compose(lhs, rhs)
        lhs & rhs    - parallel composition, same as zip_(lhs, rhs)
    """

    get: Getter[W, P]
    set: Setter[W, P]
    # NOTE: name только для repr, в сравнении не участвует.
    name: str | None = field(default=None, compare=False)

    def over(self, f: Endo[P], /) -> Endo[W]:
        """
        Lift a part transform into a whole transform.

        over(f)(w) == set(f(get(w)), w). One get, one call of f, one set.
        Anything f raises propagates as is.
        """

        def transform(whole: W) -> W:
            return self.set(f(self.get(whole)), whole)

        return transform

    def modify(self, f: Endo[P], whole: W, /) -> W:
        """Apply over(f) to whole right away."""
        return self.over(f)(whole)

    def setter(self, part: P, /) -> Endo[W]:
        """Partially applied set: whole -> set(part, whole)."""

        def apply(whole: W) -> W:
            return self.set(part, whole)

        return apply

    def then[Q](self, other: Lens[P, Q], /) -> Lens[W, Q]:
        """Method form of compose(self, other)."""
        from .compose import compose

        return compose(self, other)

    def zip[Q](self, other: Lens[W, Q], /) -> Lens[W, tuple[P, Q]]:
        """Method form of zip_(self, other)."""
        from .zip import zip_

        return zip_(self, other)

    def __rshift__[Q](self, other: Lens[P, Q], /) -> Lens[W, Q]:
        return self.then(other)

    def __and__[Q](self, other: Lens[W, Q], /) -> Lens[W, tuple[P, Q]]:
        return self.zip(other)

    def __repr__(self) -> str:
        if self.name is None:
            return "Lens(<anonymous>)"
        return f"Lens({self.name!r})"


__all__ = ("Lens",)
