from stylebox.stylesheet.parser import parse_stylesheet
from stylebox.stylesheet.model import (
    ColorValue,
    Declaration,
    Keyword,
    Length,
    Rule,
    Selector,
    SimpleSelector,
    Specificity,
    Stylesheet,
    Unit,
    UnsupportedSelector,
    Value,
)

__all__ = [
    "parse_stylesheet",
    "ColorValue",
    "Declaration",
    "Keyword",
    "Length",
    "Rule",
    "Selector",
    "SimpleSelector",
    "Specificity",
    "Stylesheet",
    "Unit",
    "UnsupportedSelector",
    "Value",
]
