"""Hand-written parser for CSS stylesheets.

Syntax example:
    h1, h2 { display: block; margin: 8px; }
    div.note { color: #cc0000; }
    #main { display: block; }

Only simple selectors (tag, ``*``, ``#id``, ``.class``) take part in the
cascade. Selectors using combinators, pseudo-classes, or attribute tests are
kept as :class:`UnsupportedSelector` and never match.
"""

from __future__ import annotations

import logging
import re

from stylebox.errors import ParseError
from stylebox.stylesheet.model import (
    ColorValue,
    Declaration,
    Keyword,
    Length,
    Rule,
    Selector,
    SimpleSelector,
    Stylesheet,
    Unit,
    UnsupportedSelector,
    Value,
)

__all__ = ["parse_stylesheet"]

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

# Matches a complete rule: selectors { declarations }
_RULE_RE = re.compile(
    r"""
    (?P<selectors>[^{}]+)   # everything before the opening brace
    \{                       # opening brace
    (?P<body>[^}]*)          # property declarations
    \}                       # closing brace
    """,
    re.VERBOSE,
)

# Matches a single declaration: name: value; (the last ';' is optional)
_DECL_RE = re.compile(
    r"""
    (?P<name>-?[a-zA-Z_][a-zA-Z0-9_-]*)  # property name
    \s*:\s*                              # colon separator
    (?P<value>[^;]+?)                    # value (non-greedy up to semicolon)
    \s*(?:;|$)                           # terminating semicolon or end of body
    """,
    re.VERBOSE,
)

_SIMPLE_SELECTOR_RE = re.compile(
    r"""
    ^(?P<tag>\*|[a-zA-Z][a-zA-Z0-9-]*)?             # type or universal
    (?P<parts>(?:[#.][a-zA-Z_-][a-zA-Z0-9_-]*)*)$   # #id and .class parts
    """,
    re.VERBOSE,
)

_PART_RE = re.compile(r"([#.])([a-zA-Z_-][a-zA-Z0-9_-]*)")

_LENGTH_RE = re.compile(r"^(?P<amount>-?(?:\d+(?:\.\d*)?|\.\d+))(?P<unit>px)$")
_COLOR_RE = re.compile(r"^#(?P<hex>[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_KEYWORD_RE = re.compile(r"^-?[a-zA-Z_][a-zA-Z0-9_-]*$")


def _parse_selector(raw: str) -> Selector:
    """Parse one comma-separated selector into a Selector object."""
    raw = raw.strip()
    if not raw:
        raise ParseError("Empty selector")
    match = _SIMPLE_SELECTOR_RE.match(raw)
    if match is None:
        logger.debug("Ignoring unsupported selector %r", raw)
        return UnsupportedSelector(text=raw)

    tag = match.group("tag")
    selector_id: str | None = None
    classes: set[str] = set()
    for prefix, name in _PART_RE.findall(match.group("parts")):
        if prefix == "#":
            # A repeated id keeps the last one.
            selector_id = name
        else:
            classes.add(name)
    return SimpleSelector(
        tag_name=None if tag in (None, "*") else tag,
        id=selector_id,
        classes=frozenset(classes),
    )


def _parse_selectors(raw: str) -> list[Selector]:
    """Parse a selector list, most specific first.

    The sort is stable, so selectors of equal specificity keep source order.
    """
    selectors = [_parse_selector(part) for part in raw.split(",")]
    selectors.sort(key=lambda s: s.specificity, reverse=True)
    return selectors


def _parse_value(raw: str) -> Value | None:
    """Parse a declaration value, or return None if it is not understood."""
    length = _LENGTH_RE.match(raw)
    if length:
        return Length(float(length.group("amount")), Unit(length.group("unit")))
    color = _COLOR_RE.match(raw)
    if color:
        digits = color.group("hex")
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return ColorValue(
            r=int(digits[0:2], 16),
            g=int(digits[2:4], 16),
            b=int(digits[4:6], 16),
        )
    if _KEYWORD_RE.match(raw):
        # Keywords are ASCII case-insensitive.
        return Keyword(raw.lower())
    return None


def _parse_declarations(body: str) -> list[Declaration]:
    """Parse the body of a rule block into declarations, in order."""
    declarations: list[Declaration] = []
    for match in _DECL_RE.finditer(body.strip()):
        name = match.group("name").strip().lower()
        raw = match.group("value").strip()
        value = _parse_value(raw)
        if value is None:
            logger.debug("Dropping declaration %s: unrecognized value %r", name, raw)
            continue
        declarations.append(Declaration(name=name, value=value))
    return declarations


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse a CSS string into a Stylesheet object.

    Returns a Stylesheet containing all parsed rules in source order.
    """
    source = _COMMENT_RE.sub("", source)
    rules: list[Rule] = []
    for match in _RULE_RE.finditer(source):
        selectors = _parse_selectors(match.group("selectors"))
        declarations = _parse_declarations(match.group("body"))
        if declarations:  # skip rules with no valid declarations
            rules.append(Rule(selectors=selectors, declarations=declarations))
    return Stylesheet(rules=rules)
