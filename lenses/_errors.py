from __future__ import annotations

import typing

class LensLawViolation(Exception):
    """A lens failed one of its law probes on a concrete sample."""

    law: str
    whole: typing.Any
    part: typing.Any

    def __init__(self, law: str, whole: typing.Any, part: typing.Any) -> None:
        self.law = law
        self.whole = whole
        self.part = part
        super().__init__(f"Lens law {law!r} violated for part {part!r} on {whole!r}")

__all__ = ("LensLawViolation",)
