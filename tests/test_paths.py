import pytest

from lottieedit.errors import PathResolutionError
from lottieedit.paths import (
    delete_at_path,
    format_path,
    get_at_path,
    parent_path,
    parse_path,
    path_to_str,
    set_at_path,
)


def test_parse_splits_dots_and_brackets():
    assert parse_path("shapes[0].it[2].c.k") == ("shapes", 0, "it", 2, "c", "k")

def test_parse_drops_empty_tokens():
    assert parse_path("shapes[1].c.") == ("shapes", 1, "c")
    assert parse_path("") == ()

def test_format_reads_back():
    steps = ("layers", 0, "shapes", 3, "g", "k", "k")
    assert format_path(steps) == "layers.0.shapes.3.g.k.k"
    assert parse_path(format_path(steps)) == steps


def test_set_replaces_and_leaves_input_alone(shape_layer, snapshot):
    before = snapshot(shape_layer)
    new_layer = set_at_path(shape_layer, "shapes[1].c.k", [0, 1, 0, 1])

    assert shape_layer == before
    assert new_layer is not shape_layer
    assert new_layer["shapes"][1]["c"]["k"] == [0, 1, 0, 1]

    new_layer["shapes"][1]["c"]["k"] = before["shapes"][1]["c"]["k"]
    assert new_layer == before

def test_set_accepts_step_tuples(shape_layer):
    new_layer = set_at_path(shape_layer, ("shapes", 2, "it", 0, "c"), [1, 1, 1])
    assert new_layer["shapes"][2]["it"][0]["c"] == [1, 1, 1]

def test_set_empty_path_replaces_root(shape_layer):
    assert set_at_path(shape_layer, "", 42) == 42

@pytest.mark.parametrize("path", [
    "shapes[9].c.k",
    "shapes[1].x.k",
    "shapes[1].c.k.z",
    "missing",
    "shapes.nm",
])
def test_set_never_creates_structure(shape_layer, snapshot, path):
    before = snapshot(shape_layer)
    with pytest.raises(PathResolutionError):
        set_at_path(shape_layer, path, 1)
    assert shape_layer == before

def test_error_names_the_failing_step(shape_layer):
    with pytest.raises(PathResolutionError) as exc:
        set_at_path(shape_layer, "shapes[1].q.k", 1)
    assert exc.value.step == "q"
    assert exc.value.path == ("shapes", 1, "q", "k")

def test_index_step_on_object_uses_decimal_key():
    doc = {"m": {"0": "zero"}}
    assert get_at_path(doc, "m.0") == "zero"
    assert set_at_path(doc, "m.0", "new") == {"m": {"0": "new"}}

def test_delete_is_copy_on_write(shape_layer, snapshot):
    before = snapshot(shape_layer)
    new_layer = delete_at_path(shape_layer, ("shapes", 0))
    assert len(new_layer["shapes"]) == 2
    assert shape_layer == before

def test_delete_root_rejected():
    with pytest.raises(PathResolutionError):
        delete_at_path({"a": 1}, ())


def test_parent_path():
    assert parent_path(("shapes", 1, "c", "k")) == ("shapes", 1, "c")
    assert parent_path(("layers",)) == ()
    assert parent_path(()) is None
    assert parent_path(None) is None

def test_path_to_str_shows_step_types():
    assert path_to_str(("layers", 0, "nm")) == "['layers', 0, 'nm']"
    assert path_to_str(()) == "[]"

def test_error_message_uses_path_to_str(shape_layer):
    with pytest.raises(PathResolutionError) as exc:
        get_at_path(shape_layer, ("shapes", 7))
    assert path_to_str(("shapes", 7)) in str(exc.value)
