from __future__ import annotations

import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from dialog_core.backends.dialog import Dialog  # noqa: E402
from dialog_core.backends.kdialog import KDialog  # noqa: E402
from dialog_core.backends.stdio import Stdio  # noqa: E402
from dialog_core.backends.zenity import Zenity  # noqa: E402
from dialog_core.config import resolve_config  # noqa: E402
from dialog_core.errors import BackendNotAvailable  # noqa: E402
from dialog_core.selection import (  # noqa: E402
    HostEnvironment,
    backend_by_name,
    create_backend,
    default_backend,
    detect_environment,
    select_backend_name,
)


class FakeWhich:
    """PATH lookup stand-in that records every query."""

    def __init__(self, *tools: str) -> None:
        self.tools = set(tools)
        self.queries: list[str] = []

    def __call__(self, name: str):
        self.queries.append(name)
        return f"/usr/bin/{name}" if name in self.tools else None


class DetectEnvironmentTests(unittest.TestCase):
    def test_reads_injected_state(self):
        which = FakeWhich("zenity", "dialog")
        host = detect_environment({"DISPLAY": ":0", "DIALOG_BACKEND": "kdialog"}, which)
        self.assertEqual(host.override, "kdialog")
        self.assertTrue(host.has_display)
        self.assertEqual(host.tools, frozenset({"zenity", "dialog"}))
        self.assertEqual(sorted(which.queries), ["dialog", "kdialog", "zenity"])

    def test_wayland_counts_as_display(self):
        host = detect_environment({"WAYLAND_DISPLAY": "wayland-0"}, FakeWhich())
        self.assertTrue(host.has_display)

    def test_empty_values_ignored(self):
        host = detect_environment({"DISPLAY": "", "DIALOG_BACKEND": ""}, FakeWhich())
        self.assertFalse(host.has_display)
        self.assertIsNone(host.override)


class SelectBackendTests(unittest.TestCase):
    def test_override_wins(self):
        host = HostEnvironment(override=" Zenity ", has_display=True, tools=frozenset({"kdialog", "zenity"}))
        self.assertEqual(select_backend_name(host), "zenity")

    def test_override_to_missing_tool_is_honoured(self):
        host = HostEnvironment(override="dialog", tools=frozenset())
        with self.assertLogs("dialog_core.selection", level="WARNING"):
            self.assertEqual(select_backend_name(host), "dialog")

    def test_unknown_override_falls_through_to_stdio(self):
        host = HostEnvironment(override="qt-dialogs", has_display=False, tools=frozenset())
        with self.assertLogs("dialog_core.selection", level="WARNING"):
            self.assertEqual(select_backend_name(host), "stdio")

    def test_unknown_override_still_autodetects(self):
        host = HostEnvironment(override="nope", has_display=True, tools=frozenset({"zenity"}))
        self.assertEqual(select_backend_name(host), "zenity")

    def test_graphical_prefers_kdialog(self):
        host = HostEnvironment(has_display=True, tools=frozenset({"kdialog", "zenity", "dialog"}))
        self.assertEqual(select_backend_name(host), "kdialog")

    def test_graphical_order_configurable(self):
        host = HostEnvironment(has_display=True, tools=frozenset({"kdialog", "zenity"}))
        self.assertEqual(select_backend_name(host, ["zenity", "kdialog"]), "zenity")

    def test_display_without_gui_tool_uses_dialog(self):
        host = HostEnvironment(has_display=True, tools=frozenset({"dialog"}))
        self.assertEqual(select_backend_name(host), "dialog")

    def test_gui_tool_without_display_ignored(self):
        host = HostEnvironment(has_display=False, tools=frozenset({"zenity", "dialog"}))
        self.assertEqual(select_backend_name(host), "dialog")

    def test_nothing_found_is_stdio(self):
        self.assertEqual(select_backend_name(HostEnvironment()), "stdio")


class BackendFactoryTests(unittest.TestCase):
    def test_default_backend_uses_config_sections(self):
        config = resolve_config(environ={})
        config["zenity"]["width"] = 420
        backend = default_backend(config, {"DISPLAY": ":1"}, FakeWhich("zenity"))
        self.assertIsInstance(backend, Zenity)
        self.assertEqual(backend.width, 420)

    def test_default_backend_stdio_without_tools(self):
        backend = default_backend(environ={}, which=FakeWhich())
        self.assertIsInstance(backend, Stdio)

    def test_broken_config_file_falls_back_to_defaults(self):
        environ = {"DIALOG_CONFIG": "/nonexistent/dialog.json"}
        with self.assertLogs("dialog_core.selection", level="WARNING") as logs:
            backend = default_backend(environ=environ, which=FakeWhich())
        self.assertIsInstance(backend, Stdio)
        self.assertIn("config path not found", logs.output[0])

    def test_broken_config_keeps_env_override(self):
        environ = {"DIALOG_CONFIG": "/nonexistent/dialog.json", "DIALOG_BACKEND": "dialog"}
        with self.assertLogs("dialog_core.selection", level="WARNING"):
            backend = default_backend(environ=environ, which=FakeWhich("dialog"))
        self.assertIsInstance(backend, Dialog)

    def test_config_backend_applies_without_env_override(self):
        config = resolve_config(environ={})
        config["backend"] = "kdialog"
        backend = default_backend(config, {}, FakeWhich("kdialog", "dialog"))
        self.assertIsInstance(backend, KDialog)

    def test_create_backend(self):
        self.assertIsInstance(create_backend("dialog"), Dialog)
        self.assertIsInstance(create_backend("STDIO"), Stdio)
        with self.assertRaises(ValueError):
            create_backend("gtk")

    def test_backend_by_name_requires_tool(self):
        with self.assertRaises(BackendNotAvailable) as ctx:
            backend_by_name("zenity", which=FakeWhich("kdialog"))
        self.assertEqual(ctx.exception.program, "zenity")
        self.assertIsInstance(backend_by_name("kdialog", which=FakeWhich("kdialog")), KDialog)
        self.assertIsInstance(backend_by_name("stdio", which=FakeWhich()), Stdio)

    def test_backend_by_name_unknown(self):
        with self.assertRaises(ValueError):
            backend_by_name("gtk", which=FakeWhich())


if __name__ == "__main__":
    unittest.main()
