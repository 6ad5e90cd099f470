# config.py
# application constants, environment overrides, embedded editor config

import os
from pathlib import Path


# ----------------------------
# identity
# ----------------------------

APP_NAME = "lottieedit"
APP_VERSION = "0.1.0"
CLI_NAME = "lottieedit"

# key under which a document may carry its own editor settings
EMBEDDED_CONFIG_KEY = "lottieedit"


# ----------------------------
# formatting / export
# ----------------------------

TEXT_INDENT = 2
EXPORT_SUFFIX = "_edited"
EXPORT_EXT = ".json"


# ----------------------------
# environment
# ----------------------------

LOG_LEVEL = os.getenv("LOTTIEEDIT_LOG_LEVEL", "WARNING").upper()

_log_dir = os.getenv("LOTTIEEDIT_LOG_DIR", "").strip()
LOG_DIR = Path(_log_dir) if _log_dir else None


def extract_embedded_editor_config(doc):
    # Returns a dict or None
    if isinstance(doc, dict):
        cfg = doc.get(EMBEDDED_CONFIG_KEY)
        if isinstance(cfg, dict):
            return cfg
    return None


def embedded_setting(doc, name, default=None):
    cfg = extract_embedded_editor_config(doc) or {}
    value = cfg.get(name)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default
