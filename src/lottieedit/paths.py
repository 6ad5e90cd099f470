# paths.py
# typed paths into JSON documents, copy-on-write edits
#
# A path is a tuple of steps: str for an object key, int for a list index.
# Dotted/bracketed strings ("shapes[0].c.k") are accepted at the edges and
# parsed into steps once.

import copy
import re

from .errors import PathResolutionError, path_to_str


_SPLIT = re.compile(r"[.\[\]]+")
_INDEX = re.compile(r"[0-9]+")


# ----------------------------
# string <-> steps
# ----------------------------

def parse_path(text):
    steps = []
    for token in _SPLIT.split(text):
        if not token:
            continue
        if _INDEX.fullmatch(token):
            steps.append(int(token))
        else:
            steps.append(token)
    return tuple(steps)

def format_path(steps):
    return ".".join(str(s) for s in steps)

def coerce_path(path):
    if path is None:
        return tuple()
    if isinstance(path, str):
        return parse_path(path)
    return tuple(path)

def parent_path(p):
    if p is None or len(p) == 0:
        return None
    return p[:-1]

def last_key(p):
    if p is None or len(p) == 0:
        return None
    return p[-1]


# ----------------------------
# resolution
# ----------------------------

def _slot(obj, step, steps):
    # the concrete key/index `step` addresses inside obj
    if isinstance(obj, list):
        if isinstance(step, bool) or not isinstance(step, int):
            raise PathResolutionError(steps, step, "key step into a list")
        if step < 0 or step >= len(obj):
            raise PathResolutionError(steps, step, "index out of range")
        return step
    if isinstance(obj, dict):
        key = str(step) if isinstance(step, int) else step
        if key not in obj:
            raise PathResolutionError(steps, step, "no such key")
        return key
    raise PathResolutionError(steps, step, f"cannot descend into {type(obj).__name__}")

def _walk(doc, prefix, steps):
    # follow prefix; errors report the full steps being resolved
    obj = doc
    for step in prefix:
        obj = obj[_slot(obj, step, steps)]
    return obj

def get_at_path(doc, path):
    steps = coerce_path(path)
    return _walk(doc, steps, steps)


# ----------------------------
# copy-on-write edits
# ----------------------------

def set_at_path(doc, path, value):
    """Return a deep copy of doc with the existing location at path replaced by value.

    The path must already resolve; nothing is created. An empty path
    replaces the whole document.
    """
    steps = coerce_path(path)
    if len(steps) == 0:
        return value
    new_doc = copy.deepcopy(doc)
    parent = _walk(new_doc, parent_path(steps), steps)
    parent[_slot(parent, steps[-1], steps)] = value
    return new_doc

def delete_at_path(doc, path):
    steps = coerce_path(path)
    if len(steps) == 0:
        raise PathResolutionError(steps, None, "cannot delete the root")
    new_doc = copy.deepcopy(doc)
    parent = _walk(new_doc, parent_path(steps), steps)
    del parent[_slot(parent, steps[-1], steps)]
    return new_doc
