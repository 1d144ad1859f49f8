"""
Lens laws
=========

Boolean probes for the algebraic laws a lens has to satisfy, plus a
small runner that collects outcomes over many samples.

Probes (each returns True iff the law holds on the given sample):
- get_set(lens, w)            set(get(w), w) == w
- set_get(lens, w, p)         get(set(p, w)) == p
- set_set(lens, w, p1, p2)    set(p2, set(p1, w)) == set(p2, w)
- set_twice_get(lens, w, p)   get(set(p, set(p, w))) == p
- compose_consistent(lhs, rhs, w, c)
                              compose(lhs, rhs) behaves like applying
                              lhs and rhs by hand

Compared values must support ==. Nothing here raises on a violation;
the probes return False and the runner records a failed LawOutcome.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from ._errors import LensLawViolation
from ._types import Sample
from .compose import compose
from .lens import Lens

type LawName = typing.Literal["get_set", "set_get", "set_set", "set_twice_get"]


# ============================================================================
# Probes
# ============================================================================


def get_set[W, P](lens: Lens[W, P], whole: W) -> bool:
    """Setting back what you got changes nothing."""
    return lens.set(lens.get(whole), whole) == whole


def set_get[W, P](lens: Lens[W, P], whole: W, part: P) -> bool:
    """What you set is what you get back."""
    return lens.get(lens.set(part, whole)) == part


def set_set[W, P](lens: Lens[W, P], whole: W, first: P, second: P) -> bool:
    """Only the last set matters."""
    return lens.set(second, lens.set(first, whole)) == lens.set(second, whole)


def set_twice_get[W, P](lens: Lens[W, P], whole: W, part: P) -> bool:
    """Setting the same part twice and reading it back yields that part."""
    new_whole = lens.set(part, lens.set(part, whole))
    return lens.get(new_whole) == part


def compose_consistent[A, B, C](lhs: Lens[A, B], rhs: Lens[B, C], whole: A, part: C) -> bool:
    """
    compose(lhs, rhs) is observably the same as walking lhs then rhs by hand:

        get(a)    == rhs.get(lhs.get(a))
        set(c, a) == lhs.set(rhs.set(c, lhs.get(a)), a)
    """
    composed = compose(lhs, rhs)
    gets_match = composed.get(whole) == rhs.get(lhs.get(whole))
    sets_match = composed.set(part, whole) == lhs.set(rhs.set(part, lhs.get(whole)), whole)
    return gets_match and sets_match


# ============================================================================
# Suite configuration
# ============================================================================

type _Runner = Callable[[Lens[typing.Any, typing.Any], typing.Any, typing.Any, typing.Any], bool]

_RUNNERS: dict[str, _Runner] = {
    "get_set": lambda lens, whole, part, other: get_set(lens, whole),
    "set_get": lambda lens, whole, part, other: set_get(lens, whole, part),
    "set_set": lambda lens, whole, part, other: set_set(lens, whole, part, other),
    "set_twice_get": lambda lens, whole, part, other: set_twice_get(lens, whole, part),
}


@dataclass(frozen=True, slots=True)
class LawSuite:
    """Which probes check_laws runs, in order."""

    laws: tuple[LawName, ...]

    def __post_init__(self) -> None:
        if not self.laws:
            raise ValueError("LawSuite.laws must not be empty")
        unknown = [law for law in self.laws if law not in _RUNNERS]
        if unknown:
            raise ValueError(f"LawSuite got unknown laws: {', '.join(unknown)}")

    @classmethod
    def canonical(cls) -> LawSuite:
        """GetSet, SetGet and SetSet as stated in the lens laws."""
        return cls(laws=("get_set", "set_get", "set_set"))

    @classmethod
    def legacy(cls) -> LawSuite:
        """The double-set probe and SetGet only."""
        return cls(laws=("set_twice_get", "set_get"))

    @classmethod
    def all(cls) -> LawSuite:
        """Every probe that works on a single lens."""
        return cls(laws=("get_set", "set_get", "set_set", "set_twice_get"))


# ============================================================================
# Reports
# ============================================================================


@dataclass(frozen=True, slots=True)
class LawOutcome:
    """Result of one probe on one sample."""

    law: str
    passed: bool
    whole: typing.Any
    part: typing.Any


@dataclass(frozen=True, slots=True)
class LawReport:
    """
    Outcomes of a law run.

    Reports form a monoid under combine (LawReport() is the empty one),
    so runs over different samples or lenses can be merged.
    """

    outcomes: tuple[LawOutcome, ...] = ()

    def __post_init__(self) -> None:
        # frozen: a caller-supplied list is copied, never aliased
        object.__setattr__(self, "outcomes", tuple(self.outcomes))

    @property
    def passed(self) -> bool:
        return all(outcome.passed for outcome in self.outcomes)

    @property
    def failures(self) -> tuple[LawOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.passed)

    def combine(self, other: LawReport, /) -> LawReport:
        return LawReport(self.outcomes + other.outcomes)


# ============================================================================
# Runners
# ============================================================================


def check_laws[W, P](
    lens: Lens[W, P],
    samples: Iterable[Sample[W, P]],
    suite: LawSuite | None = None,
) -> LawReport:
    """
    Run every law of the suite (canonical by default) on each
    (whole, part, other_part) sample.

    Raises ValueError on an empty sample set: a run that checked
    nothing must not read as a pass.
    """
    suite = suite or LawSuite.canonical()
    materialized = tuple(samples)
    if not materialized:
        raise ValueError("check_laws needs at least one sample")

    outcomes: list[LawOutcome] = []
    for whole, part, other in materialized:
        for law in suite.laws:
            passed = _RUNNERS[law](lens, whole, part, other)
            outcomes.append(LawOutcome(law, passed, whole, part))
    return LawReport(tuple(outcomes))


def verify[W, P](
    lens: Lens[W, P],
    samples: Iterable[Sample[W, P]],
    suite: LawSuite | None = None,
) -> Result[Lens[W, P], LensLawViolation]:
    """
    check_laws, folded into a Result.

    Ok(lens) when every probe passed, otherwise Error carrying the first
    failing outcome.
    """
    report = check_laws(lens, samples, suite)
    if report.passed:
        return Ok(lens)
    first = report.failures[0]
    return Error(LensLawViolation(first.law, first.whole, first.part))


__all__ = (
    "LawName",
    "LawOutcome",
    "LawReport",
    "LawSuite",
    "check_laws",
    "compose_consistent",
    "get_set",
    "set_get",
    "set_set",
    "set_twice_get",
    "verify",
)
