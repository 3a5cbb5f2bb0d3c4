from stylebox.layout.box import (
    AnonymousBlock,
    BlockNode,
    BoxType,
    Dimensions,
    EdgeSizes,
    InlineNode,
    LayoutBox,
    Rect,
)
from stylebox.layout.builder import build_layout_tree

__all__ = [
    "AnonymousBlock",
    "BlockNode",
    "BoxType",
    "Dimensions",
    "EdgeSizes",
    "InlineNode",
    "LayoutBox",
    "Rect",
    "build_layout_tree",
]
