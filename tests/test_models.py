"""
Unit tests for models.py
"""
from dataclasses import dataclass

import pytest
from pydantic import ValidationError

from cabinet.base import FileCabinet
from cabinet.models import Folder, NodeType, SizeCategory


def test_leaf_folder_creation():
    folder = Folder.leaf("Test1", "small")

    assert folder.name == "Test1"
    assert folder.size == "small"
    assert folder.children is None
    assert folder.node_type == NodeType.FOLDER


def test_composite_folder_coerces_children_to_tuple():
    child = Folder.leaf("Test1", "small")
    parent = Folder(name="A", size="medium", children=[child, None])

    assert parent.children == (child, None)
    assert parent.node_type == NodeType.CABINET


def test_composite_accepts_any_folder_shaped_children():
    @dataclass
    class MockFolder:
        name: str
        size: str

    nested = FileCabinet([Folder.leaf("x", "small")], "inner", "small")
    duck = MockFolder("y", "large")
    parent = Folder.composite("A", "medium", [nested, duck, None])

    assert parent.children == (nested, duck, None)
    assert parent.children[0] is nested


def test_file_cabinet_reports_cabinet_node_type():
    assert FileCabinet(None, "c", "small").node_type == NodeType.CABINET


def test_empty_composite_is_still_a_cabinet():
    assert Folder.composite("Empty", "small").node_type == NodeType.CABINET


def test_folder_is_frozen():
    folder = Folder.leaf("Test1", "small")
    with pytest.raises(ValidationError):
        folder.name = "other"


def test_size_is_kept_as_given():
    # Validation happens at query time, not construction
    folder = Folder.leaf("Odd", " Huge ")
    assert folder.size == " Huge "


def test_folders_with_same_fields_are_equal():
    assert Folder.leaf("Test1", "small") == Folder.leaf("Test1", "small")
    assert Folder.leaf("Test1", "small") != Folder.leaf("Test1", "large")


def test_size_categories():
    assert [c.value for c in SizeCategory] == ["small", "medium", "large"]


def test_str():
    assert str(Folder.leaf("Test1", "small")) == "Test1 (small)"
