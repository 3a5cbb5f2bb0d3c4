"""Cascade: collect the rules matching an element and merge their declarations."""

from __future__ import annotations

from stylebox.dom.model import ElementData
from stylebox.style.matcher import matches
from stylebox.stylesheet.model import Rule, Specificity, Stylesheet, Value

# Map from CSS property names to values.
PropertyMap = dict[str, Value]

MatchedRule = tuple[Specificity, Rule]


def match_rule(elem: ElementData, rule: Rule) -> MatchedRule | None:
    """Return ``(specificity, rule)`` for the first selector matching *elem*.

    Selectors are tried in the order the rule lists them. Returns None when
    none matches, including for a rule without selectors.
    """
    for selector in rule.selectors:
        if matches(elem, selector):
            return (selector.specificity, rule)
    return None


def matching_rules(elem: ElementData, stylesheet: Stylesheet) -> list[MatchedRule]:
    """Find all rules in *stylesheet* that match *elem*, in stylesheet order."""
    matched: list[MatchedRule] = []
    for rule in stylesheet.rules:
        match = match_rule(elem, rule)
        if match is not None:
            matched.append(match)
    return matched


def specified_values(elem: ElementData, stylesheet: Stylesheet) -> PropertyMap:
    """Apply *stylesheet* to a single element, returning its specified values.

    Rules are applied from lowest to highest specificity. The sort is stable,
    so among equally specific rules the one declared later wins.
    """
    values: PropertyMap = {}
    rules = matching_rules(elem, stylesheet)
    rules.sort(key=lambda matched: matched[0])
    for _, rule in rules:
        for declaration in rule.declarations:
            values[declaration.name] = declaration.value
    return values
