"""Style tree: the document tree annotated with specified values."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from stylebox.dom.model import ElementData, Node
from stylebox.style.cascade import PropertyMap, specified_values
from stylebox.stylesheet.model import Keyword, Stylesheet, Value


class Display(Enum):
    """Box generation mode of a node."""

    INLINE = "inline"
    BLOCK = "block"
    NONE = "none"


@dataclass
class StyledNode:
    """A document node with its specified values and styled children."""

    node: Node
    specified_values: PropertyMap = field(default_factory=dict)
    children: list[StyledNode] = field(default_factory=list)

    def value(self, name: str) -> Value | None:
        """Return the specified value of property *name*, if any."""
        return self.specified_values.get(name)

    def display(self) -> Display:
        """The value of the ``display`` property (defaults to inline)."""
        value = self.value("display")
        if isinstance(value, Keyword):
            if value.name == "block":
                return Display.BLOCK
            if value.name == "none":
                return Display.NONE
        return Display.INLINE

    def lookup(self, name: str, fallback_name: str, default: Value) -> Value:
        """Return property *name*, else *fallback_name*, else *default*."""
        value = self.value(name)
        if value is None:
            value = self.value(fallback_name)
        return default if value is None else value


def style_tree(root: Node, stylesheet: Stylesheet) -> StyledNode:
    """Apply *stylesheet* to an entire document tree, returning a styled tree.

    Text nodes always receive an empty property map.
    """
    styled_root = _style_node(root, stylesheet)
    stack = [styled_root]
    while stack:
        styled = stack.pop()
        for child in styled.node.children:
            styled_child = _style_node(child, stylesheet)
            styled.children.append(styled_child)
            stack.append(styled_child)
    return styled_root


def _style_node(node: Node, stylesheet: Stylesheet) -> StyledNode:
    if isinstance(node.node_type, ElementData):
        return StyledNode(node=node, specified_values=specified_values(node.node_type, stylesheet))
    return StyledNode(node=node)
