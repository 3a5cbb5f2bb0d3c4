from stylebox.style.cascade import (
    MatchedRule,
    PropertyMap,
    match_rule,
    matching_rules,
    specified_values,
)
from stylebox.style.matcher import matches
from stylebox.style.tree import Display, StyledNode, style_tree

__all__ = [
    "MatchedRule",
    "PropertyMap",
    "match_rule",
    "matching_rules",
    "specified_values",
    "matches",
    "Display",
    "StyledNode",
    "style_tree",
]
