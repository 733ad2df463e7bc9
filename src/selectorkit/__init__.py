"""selectorkit: immutable CSS selector builder and small object helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from selectorkit.errors import DuplicateSelectorPart, SelectorError
from selectorkit.selector import Selector, SelectorBuilder, combine, css_selector_builder, stringify

__all__ = [
    "__version__",
    "DuplicateSelectorPart",
    "Selector",
    "SelectorBuilder",
    "SelectorError",
    "combine",
    "css_selector_builder",
    "stringify",
]
