# session.py
# editing session: one current document, replaced wholesale on every edit
#
# reducer(state, action) is pure; Session.dispatch runs it and swaps state.
# Callers detect change with `new["doc"] is not old["doc"]`.

from pathlib import Path

from . import colors, edits
from .errors import LottieFileError, PathResolutionError, StructuralValidationError
from .fileio import default_export_name, pretty, read_lottie_file, write_lottie_file
from .logging import get_logger
from .validator import parse_lottie_text, validate_lottie

log = get_logger(__name__)


def initial_state():
    return {
        "doc":             None,
        "file_path":       None,
        "selected_layer":  None,
        "dirty":           0,
        "status_validity": "(no document)",
        "status_error":    "",
        "errors":          [],
    }


# ----------------------------
# reducer
# ----------------------------

def reducer(state, action):
    t = action["type"]
    if t == "LOAD_DOC":
        return {**state,
            "doc": action["doc"], "file_path": action.get("file_path"),
            "selected_layer": None, "dirty": 0,
            "status_validity": "loaded", "status_error": "", "errors": [],
        }
    if t in ("LOAD_FAIL", "COMMIT_FAIL"):
        errors = list(action.get("errors") or [action["error"]])
        return {**state, "status_validity": "INVALID",
                "status_error": action["error"], "errors": errors}
    if t == "COMMIT_TEXT":
        s = {**state, "doc": action["doc"], "dirty": 1,
             "status_validity": "valid", "status_error": "", "errors": []}
        s["selected_layer"] = _clamp_layer(s["doc"], state["selected_layer"])
        return s
    if t == "EDIT_DOC":
        s = {**state, "doc": action["doc"], "dirty": 1,
             "status_validity": "edited", "status_error": "", "errors": []}
        selected = action.get("selected_layer", state["selected_layer"])
        s["selected_layer"] = _clamp_layer(s["doc"], selected)
        return s
    if t == "EDIT_FAIL":
        return {**state, "status_error": action["error"]}
    if t == "SELECT_LAYER":
        return {**state, "selected_layer": _clamp_layer(state["doc"], action["index"])}
    if t == "SAVE_DONE":
        return {**state,
            "dirty": 0, "file_path": action["file_path"],
            "status_validity": "saved", "status_error": "",
        }
    if t == "SET_STATUS":
        s = dict(state)
        if action.get("validity") is not None:
            s["status_validity"] = action["validity"]
        if action.get("error") is not None:
            s["status_error"] = action["error"]
        return s
    return state

def _clamp_layer(doc, index):
    if index is None or not isinstance(doc, dict):
        return None
    layers = doc.get("layers") or []
    return index if 0 <= index < len(layers) else None


# ----------------------------
# session
# ----------------------------

class Session:
    def __init__(self, state=None):
        self.state = state or initial_state()

    @property
    def doc(self):
        return self.state["doc"]

    @property
    def dirty(self):
        return bool(self.state["dirty"])

    def dispatch(self, action):
        old = self.state
        new = reducer(old, action)
        log.debug("%s: doc %s, status %r",
                  action["type"],
                  "replaced" if new["doc"] is not old["doc"] else "kept",
                  new["status_validity"])
        self.state = new
        return new

    # -- loading / text

    def load_doc(self, doc, file_path=None):
        result = validate_lottie(doc)
        if not result.is_valid:
            self.dispatch({"type": "LOAD_FAIL", "error": result.errors[0], "errors": result.errors})
            return False
        self.dispatch({"type": "LOAD_DOC", "doc": doc, "file_path": file_path})
        return True

    def load_file(self, path):
        path = Path(path)
        try:
            doc = read_lottie_file(path)
        except StructuralValidationError as e:
            self.dispatch({"type": "LOAD_FAIL", "error": e.errors[0], "errors": e.errors})
            return False
        except LottieFileError as e:
            self.dispatch({"type": "LOAD_FAIL", "error": str(e)})
            return False
        self.dispatch({"type": "LOAD_DOC", "doc": doc, "file_path": path})
        return True

    def text(self):
        return "" if self.doc is None else pretty(self.doc)

    def commit_text(self, s):
        obj, err = parse_lottie_text(s)
        if err:
            self.dispatch({"type": "COMMIT_FAIL", "error": err})
            return False
        result = validate_lottie(obj)
        if not result.is_valid:
            self.dispatch({"type": "COMMIT_FAIL", "error": result.errors[0], "errors": result.errors})
            return False
        self.dispatch({"type": "COMMIT_TEXT", "doc": obj})
        return True

    # -- structured edits

    def _edit(self, fn, *args, **extra):
        if self.doc is None:
            self.dispatch({"type": "EDIT_FAIL", "error": "No document loaded."})
            return False
        try:
            new_doc = fn(self.doc, *args)
        except PathResolutionError as e:
            log.warning("%s failed: %s", fn.__name__, e)
            self.dispatch({"type": "EDIT_FAIL", "error": str(e)})
            return False
        result = validate_lottie(new_doc)
        if not result.is_valid:
            log.warning("%s rejected: %s", fn.__name__, "; ".join(result.errors))
            self.dispatch({"type": "EDIT_FAIL", "error": result.errors[0]})
            return False
        self.dispatch({"type": "EDIT_DOC", "doc": new_doc, **extra})
        return True

    def select_layer(self, index):
        self.dispatch({"type": "SELECT_LAYER", "index": index})

    def colors(self, layer_index=None):
        """Color properties with document-relative paths, for one layer or all of them."""
        if self.doc is None:
            return []
        if layer_index is None:
            return colors.extract_document_colors(self.doc)
        layers = self.doc.get("layers") or []
        if not 0 <= layer_index < len(layers):
            return []
        return colors.extract_colors_from_layer(layers[layer_index], ("layers", layer_index))

    def set_color(self, prop, hex_value):
        return self._edit(colors.apply_hex_color, prop, hex_value)

    def set_alpha(self, prop, alpha):
        return self._edit(colors.apply_alpha, prop, alpha)

    def set_animation_property(self, prop, value):
        return self._edit(edits.set_animation_property, prop, value)

    def set_layer_property(self, index, prop, value):
        return self._edit(edits.set_layer_property, index, prop, value)

    def set_transform_component(self, index, prop, axis, value):
        return self._edit(edits.set_transform_component, index, prop, axis, value)

    def delete_layer(self, index):
        selected = self.state["selected_layer"]
        if selected == index:
            selected = None
        elif selected is not None and selected > index:
            selected -= 1
        return self._edit(edits.delete_layer, index, selected_layer=selected)

    # -- export

    def save(self, path=None):
        if self.doc is None:
            return None
        if path is None:
            base = self.state["file_path"] or Path("animation.json")
            path = Path(base).with_name(default_export_name(base, self.doc))
        try:
            path = write_lottie_file(self.doc, path)
        except LottieFileError as e:
            self.dispatch({"type": "SET_STATUS", "validity": "save failed", "error": str(e)})
            return None
        self.dispatch({"type": "SAVE_DONE", "file_path": path})
        return path
