"""Host environment detection and default backend selection."""

from __future__ import annotations

import copy
import logging
import os
import shutil
from dataclasses import dataclass, field, replace
from typing import Callable, Mapping, Optional

from dialog_core.backends import Backend, is_available
from dialog_core.backends.dialog import Dialog
from dialog_core.backends.kdialog import KDialog
from dialog_core.backends.stdio import Stdio
from dialog_core.backends.zenity import Zenity
from dialog_core.config import (
    BACKEND_ENV,
    DEFAULT_CONFIG,
    GRAPHICAL_BACKENDS,
    normalize_backend_name,
    resolve_config,
)
from dialog_core.errors import BackendNotAvailable

logger = logging.getLogger(__name__)

DISPLAY_ENV_VARS = ("DISPLAY", "WAYLAND_DISPLAY")
TOOL_NAMES = ("dialog", "zenity", "kdialog")

Which = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class HostEnvironment:
    override: str | None = None
    has_display: bool = False
    tools: frozenset[str] = field(default_factory=frozenset)

    def to_dict(self) -> dict:
        return {
            "override": self.override,
            "has_display": self.has_display,
            "tools": sorted(self.tools),
        }


def detect_environment(environ: Mapping[str, str] | None = None, which: Which = shutil.which) -> HostEnvironment:
    """Read the override variable, the display signal and PATH; never runs a tool."""
    env = os.environ if environ is None else environ
    return HostEnvironment(
        override=env.get(BACKEND_ENV) or None,
        has_display=any(env.get(name) for name in DISPLAY_ENV_VARS),
        tools=frozenset(tool for tool in TOOL_NAMES if is_available(tool, which)),
    )


def select_backend_name(host: HostEnvironment, gui_order: list[str] | None = None) -> str:
    if host.override is not None:
        name = normalize_backend_name(host.override)
        if name is not None:
            if name != "stdio" and name not in host.tools:
                logger.warning("%s=%s requested but %s is not on PATH", BACKEND_ENV, host.override, name)
            logger.info("backend %s selected by override", name)
            return name
        logger.warning("ignoring unknown backend override: %r", host.override)

    if host.has_display:
        for name in gui_order or GRAPHICAL_BACKENDS:
            if name in host.tools:
                logger.info("backend %s selected for graphical session", name)
                return name

    if "dialog" in host.tools:
        logger.info("backend dialog selected for terminal session")
        return "dialog"

    logger.info("no dialog tool found, falling back to stdio")
    return "stdio"


def create_backend(name: str, config: dict | None = None) -> Backend:
    settings = config if config is not None else DEFAULT_CONFIG
    backend = normalize_backend_name(name)
    if backend == "stdio":
        return Stdio()
    if backend == "dialog":
        section = settings.get("dialog") or {}
        return Dialog(
            backtitle=section.get("backtitle"),
            width=section.get("width") or 0,
            height=section.get("height") or 0,
        )
    if backend == "zenity":
        section = settings.get("zenity") or {}
        return Zenity(
            icon=section.get("icon"),
            width=section.get("width"),
            height=section.get("height"),
            timeout=section.get("timeout"),
        )
    if backend == "kdialog":
        section = settings.get("kdialog") or {}
        return KDialog(icon=section.get("icon"))
    raise ValueError(f"unknown backend: {name}")


def backend_by_name(name: str, config: dict | None = None, which: Which = shutil.which) -> Backend:
    """Explicitly requested backend; its tool must be on PATH."""
    backend = normalize_backend_name(name)
    if backend is None:
        raise ValueError(f"unknown backend: {name}")
    if backend != "stdio" and not is_available(backend, which):
        raise BackendNotAvailable(backend)
    return create_backend(backend, config)


def resolve_host(
    config: dict,
    environ: Mapping[str, str] | None = None,
    which: Which = shutil.which,
) -> HostEnvironment:
    """Detected environment with the config file's backend as a fallback override."""
    host = detect_environment(environ, which)
    if host.override is None and config.get("backend"):
        host = replace(host, override=config["backend"])
    return host


def default_backend(
    config: dict | None = None,
    environ: Mapping[str, str] | None = None,
    which: Which = shutil.which,
) -> Backend:
    if config is not None:
        settings = config
    else:
        try:
            settings = resolve_config(environ=environ)
        except ValueError as exc:
            # fall back to the built-in settings; the environment override still applies
            logger.warning("ignoring dialog config: %s", exc)
            settings = copy.deepcopy(DEFAULT_CONFIG)
    host = resolve_host(settings, environ, which)
    return create_backend(select_backend_name(host, settings.get("gui_order")), settings)
