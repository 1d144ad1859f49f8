"""
Lenses: immutable, composable access to nested fields.

A Lens[W, P] pairs get: W -> P with set: (P, W) -> W. Lenses compose
sequentially (compose, >>) to reach deeper, and in parallel (zip_, &) to
view sibling fields as one tuple. The laws module probes a concrete lens
against the lens laws.

Architecture:
- lens     - the Lens value with get/set/over
- compose  - sequential composition, identity
- zip      - parallel composition (right-nested and flat)
- fields   - leaf lenses for dataclasses, NamedTuples, mappings, tuples
- laws     - law probes, LawSuite, LawReport, verify
"""

# Core type
from .lens import Lens

# Type aliases
from ._types import Endo, Getter, Sample, Setter

# Composition
from .compose import compose, compose_all, identity
from .zip import zip2, zip3, zip_, zip_all

# Leaf constructors
from .fields import attr, index, item

# Laws
from . import laws
from .laws import (
    LawOutcome,
    LawReport,
    LawSuite,
    check_laws,
    compose_consistent,
    get_set,
    set_get,
    set_set,
    set_twice_get,
    verify,
)

# Errors
from ._errors import LensLawViolation

__all__ = (
    # Core
    "Lens",
    # Types
    "Endo",
    "Getter",
    "Sample",
    "Setter",
    # Composition
    "compose",
    "compose_all",
    "identity",
    "zip_",
    "zip2",
    "zip3",
    "zip_all",
    # Leaves
    "attr",
    "index",
    "item",
    # Laws module (namespace import)
    "laws",
    # Laws
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
    # Errors
    "LensLawViolation",
)
