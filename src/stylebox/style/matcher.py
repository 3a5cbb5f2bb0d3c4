"""Selector matching against a single element."""

from __future__ import annotations

from stylebox.dom.model import ElementData
from stylebox.stylesheet.model import Selector, SimpleSelector


def matches(elem: ElementData, selector: Selector) -> bool:
    """Return True if *selector* matches *elem*.

    Only simple selectors can match; any other selector kind never does.
    """
    if isinstance(selector, SimpleSelector):
        return matches_simple_selector(elem, selector)
    return False


def matches_simple_selector(elem: ElementData, selector: SimpleSelector) -> bool:
    # Type selector
    if selector.tag_name is not None and elem.tag_name != selector.tag_name:
        return False

    # Id selector
    if selector.id is not None and elem.id() != selector.id:
        return False

    # Class selectors
    if selector.classes and not selector.classes <= elem.classes():
        return False

    return True
