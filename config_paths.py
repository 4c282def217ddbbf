import json
import logging
import os

logger = logging.getLogger(__name__)

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "unibrowse")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
UNICODE_VERSION_DEFAULT = "auto"
CURSOR_MARKER_DEFAULT = ">"


def load_config():
    cfg = {
        "UNICODE_VERSION": UNICODE_VERSION_DEFAULT,
        "CURSOR_MARKER": CURSOR_MARKER_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring config %s: %s", CONFIG_JSON, e)
        return cfg

    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected an object", CONFIG_JSON)
        return cfg

    version = data.get("unicode_version")
    if isinstance(version, str) and version.strip():
        cfg["UNICODE_VERSION"] = version.strip()

    marker = data.get("cursor_marker")
    if isinstance(marker, str) and len(marker) == 1 and marker.isprintable():
        cfg["CURSOR_MARKER"] = marker

    return cfg
