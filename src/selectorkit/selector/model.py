"""Selector model: the immutable accumulator behind the fluent builder.

A selector is rendered in CSS compound-selector order no matter which order
its parts were added in:

    element#id.class1.class2[attr1][attr2]:pseudo1:pseudo2::pseudoElement

``element``, ``id`` and ``pseudo_element`` can be set once per chain; the
sequence parts can be appended any number of times.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from selectorkit.errors import DuplicateSelectorPart

__all__ = ["Selector"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selector:
    """An immutable selector accumulator.

    Every builder method returns a new ``Selector``; the receiver is left
    untouched, so a partially built selector can be shared between chains.

    Attributes:
        element_part: Type selector (``div``), or None if unset.
        id_part: Id selector, stored with its ``#`` prefix.
        classes: Class selectors, each stored with its ``.`` prefix.
        attributes: Attribute selectors, each stored wrapped in brackets.
        pseudo_classes: Pseudo-class selectors, each stored with ``:``.
        pseudo_element_part: Pseudo-element selector, stored with ``::``.
        rendered: Precomputed output of :func:`combine`. When set it wins
            over the field-based rendering.
    """

    element_part: str | None = None
    id_part: str | None = None
    classes: tuple[str, ...] = ()
    attributes: tuple[str, ...] = ()
    pseudo_classes: tuple[str, ...] = ()
    pseudo_element_part: str | None = None
    rendered: str | None = None

    def __post_init__(self) -> None:
        # Lists show up when a selector is rebuilt from JSON.
        for name in ("classes", "attributes", "pseudo_classes"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    # --- single parts -------------------------------------------------------

    def element(self, value: str) -> Selector:
        self._ensure_unset("element", self.element_part)
        return replace(self, element_part=value)

    def id(self, value: str) -> Selector:
        self._ensure_unset("id", self.id_part)
        return replace(self, id_part=f"#{value}")

    def pseudo_element(self, value: str) -> Selector:
        self._ensure_unset("pseudo_element", self.pseudo_element_part)
        return replace(self, pseudo_element_part=f"::{value}")

    # --- repeatable parts ---------------------------------------------------

    def class_(self, value: str) -> Selector:
        return replace(self, classes=self.classes + (f".{value}",))

    def attr(self, value: str) -> Selector:
        return replace(self, attributes=self.attributes + (f"[{value}]",))

    def pseudo_class(self, value: str) -> Selector:
        return replace(self, pseudo_classes=self.pseudo_classes + (f":{value}",))

    # --- rendering ----------------------------------------------------------

    def stringify(self) -> str:
        """Render the selector as a CSS selector string."""
        if self.rendered is not None:
            return self.rendered
        return (
            (self.element_part or "")
            + (self.id_part or "")
            + "".join(self.classes)
            + "".join(self.attributes)
            + "".join(self.pseudo_classes)
            + (self.pseudo_element_part or "")
        )

    def __str__(self) -> str:
        return self.stringify()

    def _ensure_unset(self, part: str, current: str | None) -> None:
        if current is not None:
            logger.debug("Rejected duplicate %s in selector %r", part, self.stringify())
            raise DuplicateSelectorPart(part)
