"""Error types raised by the selector builder."""
from __future__ import annotations


class SelectorError(Exception):
    """Base error for all selector building errors."""


class DuplicateSelectorPart(SelectorError):
    """Raised when element, id or pseudo-element is set twice in one selector."""

    def __init__(self, part: str) -> None:
        self.part = part
        super().__init__(
            "Element, id and pseudo-element should not occur more than one time "
            "inside the selector"
        )
