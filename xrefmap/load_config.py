"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from xrefmap.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "site": {
        "root": "https://docs.unity3d.com",
        "reference_path": "Documentation/ScriptReference",
    },
    "namespaces": {
        "strip_prefixes": ["UnityEngine", "UnityEditor"],
    },
    "probe": {
        "timeout": 10.0,
        "max_attempts": 3,
        "backoff_initial": 0.5,
        "backoff_max": 8.0,
        "max_concurrent": 8,
        "min_interval": 0.0,
    },
    "workers": {
        "max_workers": 8,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
