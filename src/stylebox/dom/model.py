"""Document model: Text, ElementData, and Node dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Union

AttrMap = dict[str, str]


@dataclass(frozen=True)
class Text:
    """Character data inside an element."""

    data: str

    def __str__(self) -> str:
        return self.data


@dataclass(frozen=True)
class ElementData:
    """Tag name and attributes of an element node."""

    tag_name: str
    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only view over a private copy.
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def __hash__(self) -> int:
        return hash((self.tag_name, tuple(sorted(self.attributes.items()))))

    def id(self) -> str | None:
        """Return the ``id`` attribute, or None when the element has none."""
        return self.attributes.get("id")

    def classes(self) -> frozenset[str]:
        """Return the whitespace-separated ``class`` attribute as a set."""
        class_list = self.attributes.get("class")
        if class_list is None:
            return frozenset()
        return frozenset(class_list.split())

    def __str__(self) -> str:
        return f"<{self.tag_name}></{self.tag_name}>"


NodeType = Union[Text, ElementData]


@dataclass(frozen=True)
class Node:
    """A document node and its children, in document order."""

    node_type: NodeType
    children: tuple[Node, ...] = ()

    @property
    def is_element(self) -> bool:
        return isinstance(self.node_type, ElementData)

    @property
    def element(self) -> ElementData | None:
        """Return the element data, or None for text nodes."""
        if isinstance(self.node_type, ElementData):
            return self.node_type
        return None

    def __str__(self) -> str:
        """Render the subtree as tag-bracketed text for inspection.

        Attributes are emitted as ``name="value"`` pairs sorted by name.
        Nothing is escaped and void elements are not self-closed.
        """
        parts: list[str] = []
        # Items are nodes still to open, or closing tags already owed.
        stack: list[Node | str] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item.node_type, Text):
                parts.append(item.node_type.data)
            else:
                tag = item.node_type.tag_name
                attrs = "".join(
                    f' {name}="{value}"'
                    for name, value in sorted(item.node_type.attributes.items())
                )
                parts.append(f"<{tag}{attrs}>")
                stack.append(f"</{tag}>")
                stack.extend(reversed(item.children))
        return "".join(parts)


def text(data: str) -> Node:
    """Build a text node."""
    return Node(node_type=Text(data))


def elem(
    name: str, attrs: AttrMap | None = None, children: Iterable[Node] = ()
) -> Node:
    """Build an element node with the given attributes and children."""
    return Node(
        node_type=ElementData(tag_name=name, attributes=attrs or {}),
        children=tuple(children),
    )


def count_nodes(node: Node) -> int:
    """Return the number of nodes in the subtree rooted at *node*."""
    count = 0
    stack = [node]
    while stack:
        current = stack.pop()
        count += 1
        stack.extend(current.children)
    return count
