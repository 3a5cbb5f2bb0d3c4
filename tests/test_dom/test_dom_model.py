"""Tests for the document model and its debug serialization."""

import pytest

from stylebox.dom import ElementData, Node, Text, elem, text
from stylebox.dom.model import count_nodes


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


class TestSerialization:
    def test_nested_headings(self):
        node = elem(
            "div",
            {},
            [
                elem("h1", {}, [text("h1 text")]),
                elem("h2", {}, [text("h2 text")]),
                elem("h3", {}, [text("h3 text")]),
            ],
        )
        assert str(node) == "<div><h1>h1 text</h1><h2>h2 text</h2><h3>h3 text</h3></div>"

    def test_attributes_sorted_by_name(self):
        assert str(elem("div", {"a": "b", "c": "d"})) == '<div a="b" c="d"></div>'

    def test_attribute_insertion_order_irrelevant(self):
        assert str(elem("div", {"c": "d", "a": "b"})) == '<div a="b" c="d"></div>'

    def test_text_node(self):
        assert str(text("hello")) == "hello"

    def test_no_escaping(self):
        node = elem("p", {"title": "a<b"}, [text("1 < 2 & 3")])
        assert str(node) == '<p title="a<b">1 < 2 & 3</p>'

    def test_void_element_not_self_closed(self):
        assert str(elem("br")) == "<br></br>"

    def test_element_data_str(self):
        assert str(ElementData("span", {"id": "x"})) == "<span></span>"

    def test_text_str(self):
        assert str(Text("raw")) == "raw"


# ---------------------------------------------------------------------------
# Element data helpers
# ---------------------------------------------------------------------------


class TestElementData:
    def test_id_present(self):
        assert ElementData("div", {"id": "main"}).id() == "main"

    def test_id_absent(self):
        assert ElementData("div").id() is None

    def test_classes_split_on_whitespace(self):
        data = ElementData("div", {"class": " a  b\tc "})
        assert data.classes() == frozenset({"a", "b", "c"})

    def test_classes_absent(self):
        assert ElementData("div").classes() == frozenset()

    def test_lookup_is_case_sensitive(self):
        data = ElementData("div", {"ID": "main", "class": "Note"})
        assert data.id() is None
        assert "note" not in data.classes()


# ---------------------------------------------------------------------------
# Node structure
# ---------------------------------------------------------------------------


class TestNode:
    def test_children_are_tuple(self):
        node = elem("div", {}, [text("a"), text("b")])
        assert isinstance(node.children, tuple)
        assert len(node.children) == 2

    def test_node_is_frozen(self):
        node = text("a")
        with pytest.raises(AttributeError):
            node.children = ()  # type: ignore[misc]

    def test_elem_copies_attributes(self):
        attrs = {"id": "x"}
        node = elem("div", attrs)
        attrs["id"] = "y"
        assert node.element is not None
        assert node.element.id() == "x"

    def test_is_element(self):
        assert elem("div").is_element
        assert not text("x").is_element
        assert text("x").element is None

    def test_count_nodes(self):
        node = elem("div", {}, [elem("p", {}, [text("a")]), text("b")])
        assert count_nodes(node) == 4

    def test_equality_is_structural(self):
        assert elem("p", {"a": "b"}, [text("x")]) == elem("p", {"a": "b"}, [text("x")])
        assert isinstance(text("x"), Node)


# ---------------------------------------------------------------------------
# Read-only attributes and hashing
# ---------------------------------------------------------------------------


class TestReadOnlyAttributes:
    def test_attributes_cannot_be_assigned(self):
        node = elem("div", {"id": "x"})
        assert node.element is not None
        with pytest.raises(TypeError):
            node.element.attributes["id"] = "y"  # type: ignore[index]
        assert node.element.id() == "x"

    def test_attributes_cannot_be_deleted(self):
        data = ElementData("div", {"class": "a b"})
        with pytest.raises(TypeError):
            del data.attributes["class"]  # type: ignore[attr-defined]
        assert data.classes() == frozenset({"a", "b"})

    def test_direct_construction_copies_mapping(self):
        attrs = {"id": "x"}
        data = ElementData("div", attrs)
        attrs["id"] = "y"
        assert data.id() == "x"

    def test_element_data_is_hashable(self):
        first = ElementData("div", {"a": "b", "c": "d"})
        second = ElementData("div", {"c": "d", "a": "b"})
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_different_attributes_not_equal(self):
        assert ElementData("div", {"a": "b"}) != ElementData("div", {"a": "c"})

    def test_element_node_is_hashable(self):
        node = elem("p", {"a": "b"}, [text("x")])
        assert hash(node) == hash(elem("p", {"a": "b"}, [text("x")]))


# ---------------------------------------------------------------------------
# Deep trees
# ---------------------------------------------------------------------------


def _nested(depth: int) -> Node:
    node = text("x")
    for _ in range(depth):
        node = elem("div", {}, [node])
    return node


class TestDeepTrees:
    def test_serialize_deep_tree(self):
        assert str(_nested(1000)) == "<div>" * 1000 + "x" + "</div>" * 1000

    def test_count_deep_tree(self):
        assert count_nodes(_nested(1000)) == 1001

    def test_attributes_sorted_at_every_level(self):
        node = elem("p", {"b": "2", "a": "1"}, [elem("i", {"z": "9", "y": "8"})])
        assert str(node) == '<p a="1" b="2"><i y="8" z="9"></i></p>'
