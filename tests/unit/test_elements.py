#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the element model."""

from dataclasses import FrozenInstanceError

import pytest

from html2vdom.vdom import Element, create_element


@pytest.mark.unit
class TestCreateElement:
    """Tests for create_element."""

    def test_basic(self):
        element = create_element("p", {"className": "lead"}, "Hello", key=3)
        assert element.type == "p"
        assert element.props == {"className": "lead"}
        assert element.children == ("Hello",)
        assert element.key == 3

    def test_props_copied(self):
        props = {"className": "a"}
        element = create_element("div", props)
        props["className"] = "b"
        assert element.props["className"] == "a"

    def test_props_read_only(self):
        element = create_element("div", {"style": {"color": "red"}})
        with pytest.raises(TypeError):
            element.props["id"] = "x"
        with pytest.raises(TypeError):
            element.props["style"]["color"] = "blue"

    def test_children_flattened(self):
        child = create_element("b", None, "x")
        element = create_element("p", None, ["a", [child, None]], False, 1)
        assert element.children == ("a", child, "1")

    def test_frozen(self):
        element = create_element("p")
        with pytest.raises(FrozenInstanceError):
            element.type = "div"


@pytest.mark.unit
class TestElement:
    """Tests for Element."""

    def test_equality(self):
        assert Element("p", {"id": "a"}, ("x",), 0) == create_element("p", {"id": "a"}, "x", key=0)

    def test_type_name_for_component(self):
        def Card(props):
            return None

        assert Element(Card).type_name == "Card"

    def test_to_dict(self):
        element = create_element("div", {"style": {"color": "red"}}, create_element("b", None, "x", key=0), key=1)
        assert element.to_dict() == {
            "type": "div",
            "key": 1,
            "props": {"style": {"color": "red"}},
            "children": [{"type": "b", "key": 0, "props": {}, "children": ["x"]}],
        }
