"""Build the layout box tree from a styled tree, without computing geometry."""

from __future__ import annotations

import logging

from stylebox.errors import LayoutError
from stylebox.layout.box import BlockNode, InlineNode, LayoutBox
from stylebox.style.tree import Display, StyledNode

logger = logging.getLogger(__name__)


def build_layout_tree(style_node: StyledNode) -> LayoutBox:
    """Build the tree of LayoutBoxes rooted at *style_node*.

    Raises:
        LayoutError: if the root has ``display: none`` and so produces no box.
    """
    display = style_node.display()
    if display is Display.NONE:
        raise LayoutError("Root node has display: none", style_node=style_node)
    root = _new_box(style_node, display)
    stack = [root]
    while stack:
        parent = stack.pop()
        for child in parent.style_node.children:
            child_display = child.display()
            if child_display is Display.NONE:
                logger.debug("Skipping display: none subtree at %s", child.node.node_type)
                continue
            box = _new_box(child, child_display)
            if child_display is Display.BLOCK:
                parent.children.append(box)
            else:
                parent.get_inline_container().children.append(box)
            stack.append(box)
    return root


def _new_box(style_node: StyledNode, display: Display) -> LayoutBox:
    if display is Display.BLOCK:
        return LayoutBox(BlockNode(style_node))
    return LayoutBox(InlineNode(style_node))
