from stylebox.dom.model import AttrMap, ElementData, Node, NodeType, Text, elem, text
from stylebox.dom.parser import parse_html

__all__ = [
    "AttrMap",
    "ElementData",
    "Node",
    "NodeType",
    "Text",
    "elem",
    "text",
    "parse_html",
]
