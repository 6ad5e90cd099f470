# colors.py
# locate color-bearing shape properties, hex conversion, color edits

import math
import re
from typing import Any, NamedTuple, Optional, Tuple

from .errors import PathResolutionError
from .paths import coerce_path, format_path, get_at_path, last_key, set_at_path
from .validator import is_number


# ----------------------------
# hex <-> normalized
# ----------------------------

_HEX = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)

def _byte(x):
    if not is_number(x) or not math.isfinite(x):
        return 0
    return max(0, min(255, int(math.floor(x * 255 + 0.5))))

def normalized_to_hex(color):
    if not isinstance(color, (list, tuple)) or len(color) < 3:
        return "#000000"
    return "#" + "".join(f"{_byte(c):02x}" for c in color[:3])

def hex_to_normalized(hex_value):
    m = _HEX.fullmatch(hex_value) if isinstance(hex_value, str) else None
    if not m:
        return [0, 0, 0, 1]
    return [int(m.group(i), 16) / 255 for i in (1, 2, 3)] + [1]

def is_rgb(x):
    return isinstance(x, list) and len(x) >= 3 and all(is_number(c) for c in x[:3])


# ----------------------------
# color properties
# ----------------------------

class ColorProperty(NamedTuple):
    """One color-bearing location, relative to the layer or document that was scanned.

    `value` is what the shape holds (raw array or `{k: ...}` container);
    `color` is the RGB[A] this entry stands for. Gradient entries share the
    table path and differ by `stop`.
    """
    path: str
    label: str
    value: Any
    type: str
    steps: Tuple = ()
    stop: Optional[int] = None
    color: Tuple = ()

    @property
    def hex(self):
        return normalized_to_hex(self.color)

    @property
    def alpha(self):
        if self.type != "gradient" and len(self.color) > 3:
            return self.color[3]
        return None


def _solid(kind, label):
    def extract(shape, base):
        c = shape.get("c")
        if is_rgb(c):
            steps, color = base + ("c",), c
        elif isinstance(c, dict) and is_rgb(c.get("k")):
            steps, color = base + ("c", "k"), c["k"]
        else:
            return []
        return [ColorProperty(format_path(steps), label, c, kind, steps, None, tuple(color))]
    return extract

def _gradient_table(g, base):
    if not isinstance(g, dict):
        return None, None
    k = g.get("k")
    if isinstance(k, list):
        return base + ("g", "k"), k
    if isinstance(k, dict) and isinstance(k.get("k"), list):
        return base + ("g", "k", "k"), k["k"]
    return None, None

def _gradient(shape, base):
    g = shape.get("g")
    steps, table = _gradient_table(g, base)
    if table is None:
        return []
    count = len(table) // 4
    stops = g.get("p")
    if is_number(stops) and math.isfinite(stops) and int(stops) == stops and stops >= 0:
        count = min(count, int(stops))
    out = []
    path = format_path(steps)
    for i in range(count):
        start = i * 4 + 1
        rgb = table[start:start + 3]
        if not is_rgb(rgb):
            continue
        out.append(ColorProperty(path, f"Gradient Color {i + 1}", g, "gradient", steps, i, tuple(rgb)))
    return out

# closed set of shape kinds carrying colors; groups are walked, not read
_EXTRACTORS = {
    "fl": _solid("fill", "Fill Color"),
    "st": _solid("stroke", "Stroke Color"),
    "gf": _gradient,
}
GROUP = "gr"


def extract_colors_from_shape(shape, base_path=()):
    if not isinstance(shape, dict):
        return []
    ty = shape.get("ty")
    extract = _EXTRACTORS.get(ty) if isinstance(ty, str) else None
    if extract is None:
        return []
    return extract(shape, coerce_path(base_path))

def _walk_shapes(shapes, base, out):
    for i, shape in enumerate(shapes):
        shape_path = base + (i,)
        out.extend(extract_colors_from_shape(shape, shape_path))
        if isinstance(shape, dict) and shape.get("ty") == GROUP and isinstance(shape.get("it"), list):
            _walk_shapes(shape["it"], shape_path + ("it",), out)

def extract_colors_from_layer(layer, base_path=()):
    out = []
    if not isinstance(layer, dict) or not isinstance(layer.get("shapes"), list):
        return out
    _walk_shapes(layer["shapes"], coerce_path(base_path) + ("shapes",), out)
    return out

def extract_document_colors(doc):
    out = []
    layers = doc.get("layers") if isinstance(doc, dict) else None
    if not isinstance(layers, list):
        return out
    for i, layer in enumerate(layers):
        out.extend(extract_colors_from_layer(layer, ("layers", i)))
    return out


# ----------------------------
# edits (copy-on-write)
# ----------------------------

def update_color_in_layer(layer, color_path, new_color):
    return set_at_path(layer, color_path, list(new_color))

def _current_list(root, prop):
    current = get_at_path(root, prop.steps)
    if not isinstance(current, list):
        raise PathResolutionError(prop.steps, last_key(prop.steps), "not a color array")
    return current

def apply_hex_color(root, prop, hex_value):
    """Set prop's color from a hex string; root is whatever prop was scanned from.

    Fill/stroke colors keep their previous alpha. Gradient entries rewrite
    only the RGB of their own stop.
    """
    rgba = hex_to_normalized(hex_value)
    current = _current_list(root, prop)

    if prop.type == "gradient":
        start = prop.stop * 4 + 1
        if start + 3 > len(current):
            raise PathResolutionError(prop.steps + (start + 2,), start + 2, "index out of range")
        table = list(current)
        table[start:start + 3] = rgba[:3]
        return set_at_path(root, prop.steps, table)

    if len(current) > 3:
        rgba[3] = current[3]
    return set_at_path(root, prop.steps, rgba)

def apply_alpha(root, prop, alpha):
    current = _current_list(root, prop)
    if prop.type == "gradient" or len(current) <= 3:
        raise PathResolutionError(prop.steps + (3,), 3, "no alpha channel")
    new_color = list(current)
    new_color[3] = max(0.0, min(1.0, float(alpha)))
    return set_at_path(root, prop.steps, new_color)
