from selectorkit.selector.model import Selector
from selectorkit.selector.builder import SelectorBuilder, combine, css_selector_builder, stringify

__all__ = ["Selector", "SelectorBuilder", "combine", "css_selector_builder", "stringify"]
