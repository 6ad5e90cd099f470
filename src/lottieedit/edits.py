# edits.py
# document-level edits: animation metadata, layers, transforms
#
# Every function returns a new document; the input is never mutated.

import copy

from .errors import PathResolutionError
from .paths import delete_at_path, get_at_path, set_at_path


LAYER_TYPES = {
    0: "Precomp",
    1: "Solid",
    2: "Image",
    3: "Null",
    4: "Shape",
    5: "Text",
}

ANIMATION_PROPERTIES = ("nm", "fr", "w", "h")
LAYER_PROPERTIES = ("nm", "ip", "op", "st")
TRANSFORM_VECTORS = ("p", "s")


def layer_type_name(ty):
    return LAYER_TYPES.get(ty, f"Type {ty}")

def layer_display_name(layer, index):
    nm = layer.get("nm") if isinstance(layer, dict) else None
    return nm or f"Layer {index + 1}"

def layer_summaries(doc):
    out = []
    for i, layer in enumerate(doc.get("layers") or []):
        ty = layer.get("ty") if isinstance(layer, dict) else None
        out.append({"index": i, "type": layer_type_name(ty), "name": layer_display_name(layer, i)})
    return out


def set_animation_property(doc, prop, value):
    # top-level keys may be added (e.g. a missing "nm"), unlike nested paths
    if prop not in ANIMATION_PROPERTIES:
        raise PathResolutionError((prop,), prop, "not an editable animation property")
    if not isinstance(doc, dict):
        raise PathResolutionError((prop,), prop, "document is not an object")
    new_doc = copy.deepcopy(doc)
    new_doc[prop] = value
    return new_doc

def set_layer_property(doc, index, prop, value):
    steps = ("layers", index)
    if prop not in LAYER_PROPERTIES:
        raise PathResolutionError(steps + (prop,), prop, "not an editable layer property")
    if not isinstance(get_at_path(doc, steps), dict):
        raise PathResolutionError(steps, index, "layer is not an object")
    new_doc = copy.deepcopy(doc)
    new_doc["layers"][index][prop] = value
    return new_doc

def delete_layer(doc, index):
    return delete_at_path(doc, ("layers", index))

def set_transform_component(doc, index, prop, axis, value):
    """Replace one axis of a static position/scale vector: layers[index].ks.<prop>.k[axis]."""
    steps = ("layers", index, "ks", prop, "k")
    if prop not in TRANSFORM_VECTORS:
        raise PathResolutionError(steps, prop, "not an editable transform vector")
    vector = get_at_path(doc, steps)
    if not isinstance(vector, list):
        raise PathResolutionError(steps, "k", "not a static vector")
    return set_at_path(doc, steps + (axis,), value)
