"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from doxyview.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "verbose": False,
    "debug": False,
    # Prepended to every relative permalink, e.g. "/api/".
    "page_base_url": "",
    "permalinks": {
        "template_hash_length": 8,
        "anonymous_placeholder": "anonymous",
    },
    "collection_names_by_kind": {
        "class": "classes",
        "struct": "classes",
        "union": "classes",
        "namespace": "namespaces",
        "file": "files",
        "dir": "files",
        "group": "groups",
        "page": "pages",
    },
    "hidden_pages": ["deprecated", "todo"],
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
        else:
            logger.warning("Config file %s not found, using defaults", path)
    return config
