import copy
import json

import pytest


def _shape_layer():
    return {
        "ty": 4, "nm": "Shapes", "ip": 0, "op": 60, "st": 0,
        "ks": {
            "p": {"a": 0, "k": [50, 50, 0]},
            "s": {"a": 0, "k": [100, 100, 100]},
            "r": {"a": 0, "k": 0},
            "o": {"a": 0, "k": 100},
        },
        "shapes": [
            {"ty": "rc", "nm": "Rect", "s": {"a": 0, "k": [20, 20]}},
            {"ty": "fl", "nm": "Fill", "c": {"a": 0, "k": [1, 0, 0, 1]}, "o": {"a": 0, "k": 100}},
            {"ty": "gr", "nm": "Group", "it": [
                {"ty": "st", "nm": "Stroke", "c": [0, 0, 1], "w": {"a": 0, "k": 2}},
                {"ty": "gf", "nm": "Gradient", "g": {"p": 2, "k": {"a": 0, "k": [0, 1, 1, 1, 1, 0, 0, 0]}}},
                {"ty": "tr"},
            ]},
        ],
    }


@pytest.fixture
def minimal_doc():
    return {"v": "5.5.2", "fr": 30, "w": 100, "h": 100, "layers": []}


@pytest.fixture
def shape_layer():
    return _shape_layer()


@pytest.fixture
def doc():
    return {
        "v": "5.5.2", "fr": 30, "ip": 0, "op": 60, "w": 100, "h": 100, "nm": "Demo",
        "layers": [
            _shape_layer(),
            {"ty": 3, "nm": "Null", "ip": 0, "op": 60, "st": 0, "ks": {}},
        ],
    }


@pytest.fixture
def doc_file(tmp_path, doc):
    p = tmp_path / "demo.json"
    p.write_text(json.dumps(doc), encoding="utf-8")
    return p


@pytest.fixture
def snapshot():
    return copy.deepcopy
