"""CSS box model types. All sizes are in px."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from stylebox.style.tree import StyledNode


@dataclass
class Rect:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass
class EdgeSizes:
    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0


@dataclass
class Dimensions:
    """Content area position and the edges surrounding it.

    ``content`` is relative to the document origin.
    """

    content: Rect = field(default_factory=Rect)
    padding: EdgeSizes = field(default_factory=EdgeSizes)
    border: EdgeSizes = field(default_factory=EdgeSizes)
    margin: EdgeSizes = field(default_factory=EdgeSizes)


@dataclass(frozen=True)
class BlockNode:
    style_node: StyledNode


@dataclass(frozen=True)
class InlineNode:
    style_node: StyledNode


@dataclass(frozen=True)
class AnonymousBlock:
    """Synthesized block holding inline content; it has no styled node."""


BoxType = Union[BlockNode, InlineNode, AnonymousBlock]


@dataclass
class LayoutBox:
    """A node in the layout tree. Dimensions start at zero."""

    box_type: BoxType
    dimensions: Dimensions = field(default_factory=Dimensions)
    children: list[LayoutBox] = field(default_factory=list)

    @property
    def style_node(self) -> StyledNode | None:
        """The styled node this box was generated for, None if anonymous."""
        if isinstance(self.box_type, (BlockNode, InlineNode)):
            return self.box_type.style_node
        return None

    def get_inline_container(self) -> LayoutBox:
        """Return the box that a new inline child should be added to.

        Inline and anonymous boxes hold inline content themselves. A block
        box keeps using its trailing anonymous block, creating one if the
        last child is anything else.
        """
        if isinstance(self.box_type, (InlineNode, AnonymousBlock)):
            return self
        if not self.children or not isinstance(self.children[-1].box_type, AnonymousBlock):
            self.children.append(LayoutBox(AnonymousBlock()))
        return self.children[-1]
