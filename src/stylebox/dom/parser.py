"""Lark-based parser that turns HTML source into a document tree."""

from __future__ import annotations

from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from stylebox.dom.model import Node, elem, text as text_node
from stylebox.errors import ParseError

__all__ = ["parse_html"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class HtmlTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into document nodes."""

    def text(self, items: list[Token]) -> Node:
        return text_node(str(items[0]))

    def attribute(self, items: list[Token]) -> tuple[str, str]:
        name, raw = items
        # Strip the surrounding quotes.
        return (str(name), str(raw)[1:-1])

    def element(self, items: list[object]) -> Node:
        open_name = items[0]
        close_name = items[-1]
        if str(open_name) != str(close_name):
            raise ParseError(
                f"Unmatched closing tag </{close_name}> for <{open_name}>",
                line=getattr(close_name, "line", None),
                column=getattr(close_name, "column", None),
            )
        attrs: dict[str, str] = {}
        children: list[Node] = []
        for item in items[1:-1]:
            if isinstance(item, tuple):
                attrs[item[0]] = item[1]
            else:
                children.append(item)  # type: ignore[arg-type]
        return elem(str(open_name), attrs, children)

    def start(self, items: list[Node]) -> list[Node]:
        return list(items)


def parse_html(source: str, root_tag: str = "html") -> Node:
    """Parse an HTML string into a document tree.

    A fragment with a single top-level node returns that node. Any other
    fragment is wrapped in a synthesized *root_tag* element.
    """
    # Callbacks run as LALR reduces each rule; there is no recursive tree walk.
    parser = Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
        transformer=HtmlTransformer(),
    )
    try:
        nodes = parser.parse(source)
    except UnexpectedInput as e:
        raise ParseError(str(e), line=e.line, column=e.column) from e
    if len(nodes) == 1:
        return nodes[0]
    return elem(root_tag, {}, nodes)
