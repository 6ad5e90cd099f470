import pytest

from lottieedit.edits import (
    delete_layer,
    layer_summaries,
    layer_type_name,
    set_animation_property,
    set_layer_property,
    set_transform_component,
)
from lottieedit.errors import PathResolutionError


def test_layer_type_names():
    assert layer_type_name(4) == "Shape"
    assert layer_type_name(0) == "Precomp"
    assert layer_type_name(13) == "Type 13"

def test_layer_summaries(doc):
    assert layer_summaries(doc) == [
        {"index": 0, "type": "Shape", "name": "Shapes"},
        {"index": 1, "type": "Null", "name": "Null"},
    ]
    del doc["layers"][1]["nm"]
    assert layer_summaries(doc)[1]["name"] == "Layer 2"

def test_animation_property(doc, snapshot):
    before = snapshot(doc)
    new_doc = set_animation_property(doc, "fr", 24)
    assert new_doc["fr"] == 24
    assert doc == before

def test_layer_property(doc, snapshot):
    before = snapshot(doc)
    new_doc = set_layer_property(doc, 1, "nm", "Anchor")
    assert new_doc["layers"][1]["nm"] == "Anchor"
    assert new_doc["layers"][0] == before["layers"][0]
    assert doc == before

def test_layer_property_bad_index(doc):
    with pytest.raises(PathResolutionError):
        set_layer_property(doc, 5, "nm", "x")

def test_delete_layer(doc, snapshot):
    before = snapshot(doc)
    new_doc = delete_layer(doc, 0)
    assert [l["nm"] for l in new_doc["layers"]] == ["Null"]
    assert doc == before

def test_transform_component(doc, snapshot):
    before = snapshot(doc)
    new_doc = set_transform_component(doc, 0, "p", 1, 75)
    assert new_doc["layers"][0]["ks"]["p"]["k"] == [50, 75, 0]
    assert doc == before

def test_transform_component_missing_vector(doc):
    with pytest.raises(PathResolutionError):
        set_transform_component(doc, 1, "s", 0, 50)
    with pytest.raises(PathResolutionError):
        set_transform_component(doc, 0, "r", 0, 50)

def test_property_edits_do_not_share_structure(doc):
    new_doc = set_animation_property(doc, "nm", "Copy")
    assert new_doc["layers"] is not doc["layers"]
    new_doc = set_layer_property(doc, 0, "nm", "Copy")
    assert new_doc["layers"][0]["ks"] is not doc["layers"][0]["ks"]
    assert new_doc["layers"][1] is not doc["layers"][1]

@pytest.mark.parametrize("edit", [
    lambda d: set_animation_property(d, "layers", 5),
    lambda d: set_animation_property(d, "v", 5),
    lambda d: set_layer_property(d, 0, "ty", "x"),
    lambda d: set_layer_property(d, 0, "shapes", None),
    lambda d: set_transform_component(d, 0, "r", 0, 5),
])
def test_only_listed_properties_are_editable(doc, snapshot, edit):
    before = snapshot(doc)
    with pytest.raises(PathResolutionError):
        edit(doc)
    assert doc == before
