"""
Core type definitions for lenses.

Алиасы функций, из которых собираются линзы.
"""

from __future__ import annotations

from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Getter = projection from the whole down to the focused part
type Getter[W, P] = Callable[[W], P]

# Setter = (new_part, whole) -> new_whole, never mutates whole
# NOTE: Порядок аргументов (part, whole), как в set(part, whole).
type Setter[W, P] = Callable[[P, W], W]

# Endo = function from a type to itself (used by over/modify)
type Endo[T] = Callable[[T], T]

# Sample = (whole, part, other_part) triple fed to law checks
type Sample[W, P] = tuple[W, P, P]

__all__ = (
    "Getter",
    "Setter",
    "Endo",
    "Sample",
)
