# validator.py
# minimal Lottie document shape checks against lottie_schema.json
#
# Advisory only: geometry, color lengths, keyframe fields and asset
# references are not checked.

import json
from pathlib import Path
from typing import List, NamedTuple

from jsonschema import Draft7Validator

from .errors import StructuralValidationError

_SCHEMA_PATH = Path(__file__).resolve().parent / "lottie_schema.json"


def load_schema() -> dict:
    with _SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)

_SCHEMA = load_schema()
_VALIDATOR = Draft7Validator(_SCHEMA)


class ValidationResult(NamedTuple):
    is_valid: bool
    errors: List[str]


NOT_AN_OBJECT = "Lottie JSON must be a valid object."

# document fields in check order
DOCUMENT_MESSAGES = {
    "v": "Lottie JSON must have a 'v' property of type string.",
    "fr": "Lottie JSON must have a 'fr' property of type number.",
    "w": "Lottie JSON must have a 'w' property of type number.",
    "h": "Lottie JSON must have a 'h' property of type number.",
    "layers": "Lottie JSON must contain a 'layers' array.",
}
_DOCUMENT_ORDER = list(DOCUMENT_MESSAGES)

LAYER_MESSAGES = {
    "ty": "Layer {i} must have a 'ty' (type) property of type number.",
    "ip": "Layer {i} must have an 'ip' (in point) property of type number.",
    "op": "Layer {i} must have an 'op' (out point) property of type number.",
}
_LAYER_ORDER = list(LAYER_MESSAGES)
LAYER_NOT_OBJECT = "Layer {i} must be an object."


def is_number(x):
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _field_path(error):
    # missing fields report the containing object; point at the field instead
    path = list(error.absolute_path)
    if error.validator == "required":
        path.append(error.validator_value[0])
    return path

def _message(path):
    """(sort key, message) for a schema error location, or None if unmapped."""
    if len(path) == 1 and path[0] in DOCUMENT_MESSAGES:
        return (_DOCUMENT_ORDER.index(path[0]),), DOCUMENT_MESSAGES[path[0]]
    if len(path) >= 2 and path[0] == "layers" and isinstance(path[1], int):
        i = path[1]
        if len(path) == 2:
            return (len(_DOCUMENT_ORDER), i, -1), LAYER_NOT_OBJECT.format(i=i)
        if len(path) == 3 and path[2] in LAYER_MESSAGES:
            return (len(_DOCUMENT_ORDER), i, _LAYER_ORDER.index(path[2])), LAYER_MESSAGES[path[2]].format(i=i)
    return None


def validate_lottie(candidate):
    if not isinstance(candidate, dict):
        return ValidationResult(False, [NOT_AN_OBJECT])

    found = {}
    for e in _VALIDATOR.iter_errors(candidate):
        mapped = _message(_field_path(e))
        if mapped is not None:
            found.setdefault(*mapped)
    errors = [found[k] for k in sorted(found)]
    return ValidationResult(not errors, errors)

def require_valid_lottie(candidate):
    result = validate_lottie(candidate)
    if not result.is_valid:
        raise StructuralValidationError(result.errors)
    return candidate


def parse_lottie_text(s):
    try:
        obj = json.loads(s)
        return obj, None
    except json.JSONDecodeError as e:
        msg = f"{e.msg} (line {e.lineno}, col {e.colno})"
        return None, msg
