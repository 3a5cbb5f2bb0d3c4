"""Render pipeline: parse HTML and CSS, build the style tree and layout tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from stylebox.config import StyleboxConfig
from stylebox.dom.model import Node, count_nodes
from stylebox.dom.parser import parse_html
from stylebox.layout.box import LayoutBox
from stylebox.layout.builder import build_layout_tree
from stylebox.style.tree import StyledNode, style_tree
from stylebox.stylesheet.model import Stylesheet
from stylebox.stylesheet.parser import parse_stylesheet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderTree:
    """The document, stylesheet, and the trees derived from them.

    Keeping all four together ties the lifetime of the styled and layout
    trees to the sources they reference.
    """

    document: Node
    stylesheet: Stylesheet
    styled: StyledNode
    layout: LayoutBox


def count_boxes(box: LayoutBox) -> int:
    """Return the number of boxes in the subtree rooted at *box*."""
    count = 0
    stack = [box]
    while stack:
        current = stack.pop()
        count += 1
        stack.extend(current.children)
    return count


def render(html: str, css: str, config: StyleboxConfig | None = None) -> RenderTree:
    """Parse *html* and *css* and build the layout box tree.

    User-agent rules from the config come first, so author rules of equal
    specificity override them.

    Raises:
        ParseError: if either source cannot be parsed.
        LayoutError: if the document root has ``display: none``.
    """
    config = config or StyleboxConfig()
    document = parse_html(html, root_tag=config.root_tag)
    stylesheet = parse_stylesheet(config.user_agent_css) + parse_stylesheet(css)
    styled = style_tree(document, stylesheet)
    layout = build_layout_tree(styled)
    logger.info(
        "Rendered %d nodes with %d rules into %d boxes",
        count_nodes(document),
        len(stylesheet.rules),
        count_boxes(layout),
    )
    return RenderTree(
        document=document, stylesheet=stylesheet, styled=styled, layout=layout
    )
