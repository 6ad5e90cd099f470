# fileio.py
# reading and exporting Lottie files

import json
import os
import tempfile
from pathlib import Path

from .config import EXPORT_EXT, EXPORT_SUFFIX, TEXT_INDENT, embedded_setting
from .errors import LottieFileError
from .logging import get_logger
from .validator import parse_lottie_text, require_valid_lottie

log = get_logger(__name__)


def pretty(obj, indent=TEXT_INDENT):
    return json.dumps(obj, indent=indent, ensure_ascii=False, sort_keys=False)

def compact(obj):
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


def atomic_write_text(path, text):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=path.name + ".", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, str(path))
    finally:
        if os.path.exists(tmp):
            os.remove(tmp)


def read_lottie_text(path):
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.error("could not read %s: %s", path, e)
        raise LottieFileError("Failed to read the file.") from e

def read_lottie_file(path):
    """Read, parse and validate a Lottie file.

    Raises LottieFileError for unreadable or syntactically invalid files and
    StructuralValidationError for documents that fail the shape checks.
    """
    obj, err = parse_lottie_text(read_lottie_text(path))
    if err:
        log.error("invalid JSON in %s: %s", path, err)
        raise LottieFileError("Failed to parse Lottie JSON file.")
    return require_valid_lottie(obj)

def write_lottie_file(doc, path):
    path = Path(path)
    try:
        atomic_write_text(path, compact(doc))
    except OSError as e:
        log.error("could not write %s: %s", path, e)
        raise LottieFileError(f"Could not write file: {e}") from e
    log.info("exported %s", path)
    return path


def default_export_name(path, doc=None):
    """Bare file name for an export beside `path`; an embedded "export-name" wins.

    Directory parts of the embedded name are dropped so the export stays
    next to the source file.
    """
    name = Path(embedded_setting(doc, "export-name", "")).name
    if name not in ("", ".", ".."):
        return name if name.endswith(EXPORT_EXT) else name + EXPORT_EXT
    return f"{Path(path).stem}{EXPORT_SUFFIX}{EXPORT_EXT}"
