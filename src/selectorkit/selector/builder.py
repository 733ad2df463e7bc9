"""Builder facade: stateless entry points that start a new selector chain.

Usage:
    builder = css_selector_builder

    builder.id("main").class_("container").class_("editable").stringify()
        -> '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("table").id("data"),
    ).stringify()
        -> 'div#main + table#data'
"""

from __future__ import annotations

import logging

from selectorkit.selector.model import Selector

__all__ = ["SelectorBuilder", "combine", "css_selector_builder", "stringify"]

logger = logging.getLogger(__name__)

# Shared starting point for every chain. Selectors are immutable, so one
# instance is enough.
_ROOT = Selector()


def stringify(selector: Selector) -> str:
    """Return the CSS string for *selector*."""
    return selector.stringify()


def combine(left: Selector, combinator: str, right: Selector) -> Selector:
    """Join two selectors with *combinator* into a complex selector.

    The combinator is inserted verbatim with one space on each side, so the
    descendant combinator ``" "`` yields three spaces between the halves.
    """
    rendered = f"{left.stringify()} {combinator} {right.stringify()}"
    logger.debug("Combined selector: %r", rendered)
    return Selector(rendered=rendered)


class SelectorBuilder:
    """Facade exposing one entry point per selector part, plus ``combine``."""

    def element(self, value: str) -> Selector:
        return _ROOT.element(value)

    def id(self, value: str) -> Selector:
        return _ROOT.id(value)

    def class_(self, value: str) -> Selector:
        return _ROOT.class_(value)

    def attr(self, value: str) -> Selector:
        return _ROOT.attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return _ROOT.pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return _ROOT.pseudo_element(value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        return combine(left, combinator, right)

    @property
    def root(self) -> Selector:
        """The empty selector every chain starts from."""
        return _ROOT


css_selector_builder = SelectorBuilder()
