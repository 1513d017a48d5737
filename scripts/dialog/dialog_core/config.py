"""Backend settings resolution and user config merging."""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Mapping

BACKEND_NAMES = ["stdio", "dialog", "zenity", "kdialog"]
GRAPHICAL_BACKENDS = ["kdialog", "zenity"]

BACKEND_ENV = "DIALOG_BACKEND"
CONFIG_ENV = "DIALOG_CONFIG"

DEFAULT_CONFIG: dict = {
    "backend": None,
    "gui_order": list(GRAPHICAL_BACKENDS),
    "dialog": {
        "backtitle": None,
        "width": 0,
        "height": 0,
    },
    "zenity": {
        "icon": None,
        "width": None,
        "height": None,
        "timeout": None,
    },
    "kdialog": {
        "icon": None,
    },
}

SIZE_KEYS = {"width", "height", "timeout"}


def normalize_backend_name(name: str | None) -> str | None:
    if name is None:
        return None
    value = str(name).strip().lower()
    if value in BACKEND_NAMES:
        return value
    return None


def load_user_config(path: str | None) -> dict:
    if not path:
        return {}

    config_path = Path(path)
    if not config_path.exists():
        raise ValueError(f"config path not found: {config_path}")

    try:
        payload = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON config: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValueError(f"config must be a JSON object: {config_path}")
    return payload


def _merge_section(defaults: dict, overrides) -> dict:
    merged = dict(defaults)
    if not isinstance(overrides, dict):
        return merged
    for key in defaults:
        if key not in overrides:
            continue
        value = overrides[key]
        if key in SIZE_KEYS and value is not None:
            # sizes are non-negative integers
            try:
                value = max(0, int(value))
            except (TypeError, ValueError) as exc:
                raise ValueError(f"invalid {key}: {value!r}") from exc
        merged[key] = value
    return merged


def resolve_config(config_path: str | None = None, environ: Mapping[str, str] | None = None) -> dict:
    env = os.environ if environ is None else environ
    resolved = copy.deepcopy(DEFAULT_CONFIG)
    user_config = load_user_config(config_path or env.get(CONFIG_ENV))

    selected = user_config.get("backend")
    if selected:
        backend = normalize_backend_name(selected)
        if backend is None:
            raise ValueError(f"unknown backend in config: {selected}")
        resolved["backend"] = backend

    gui_order = user_config.get("gui_order")
    if isinstance(gui_order, list) and gui_order:
        allowed = set(GRAPHICAL_BACKENDS)
        filtered = [str(name).strip().lower() for name in gui_order]
        filtered = [name for name in filtered if name in allowed]
        if filtered:
            resolved["gui_order"] = filtered

    for section in ("dialog", "zenity", "kdialog"):
        resolved[section] = _merge_section(DEFAULT_CONFIG[section], user_config.get(section))

    # The environment override wins over the file; unknown names are left for
    # selection to report.
    if env.get(BACKEND_ENV):
        resolved["backend"] = env[BACKEND_ENV]

    return resolved
