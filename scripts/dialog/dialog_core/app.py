"""Command-line entrypoint for showing a single dialog box."""

from __future__ import annotations

import argparse
import json
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dialog_core.backends import Backend
from dialog_core.config import BACKEND_NAMES, resolve_config
from dialog_core.dialogs import DIALOG_KINDS, Input
from dialog_core.errors import DialogError
from dialog_core.models import Choice
from dialog_core.selection import backend_by_name, create_backend, resolve_host, select_backend_name

EXIT_OK = 0
EXIT_DECLINED = 1
EXIT_ERROR = 2


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _kv_table(rows: list[tuple[str, str]]) -> Table:
    table = Table(box=None, show_header=False, expand=True, pad_edge=False)
    table.add_column("key", style="bold")
    table.add_column("value", style="default")
    for key, value in rows:
        table.add_row(key, value)
    return table


def _run_detect(args: argparse.Namespace, config: dict, console: Console) -> int:
    host = resolve_host(config)
    gui_order = config.get("gui_order") or []
    selected = select_backend_name(host, gui_order)

    if args.json:
        payload = {"environment": host.to_dict(), "gui_order": gui_order, "selected": selected}
        print(json.dumps(payload, indent=2))
        return EXIT_OK

    rows = [
        ("Override", host.override or "-"),
        ("Display", "yes" if host.has_display else "no"),
        ("Tools", ", ".join(sorted(host.tools)) or "none"),
        ("GUI order", ", ".join(gui_order)),
        ("Selected", selected),
    ]
    console.print(Panel(_kv_table(rows), title="[bold]Dialog Backends[/bold]", border_style="cyan"))
    return EXIT_OK


def _resolve_backend(args: argparse.Namespace, config: dict) -> Backend:
    if args.backend:
        return backend_by_name(args.backend, config)
    host = resolve_host(config)
    return create_backend(select_backend_name(host, config.get("gui_order")), config)


def _run_dialog(args: argparse.Namespace, config: dict, console: Console) -> int:
    dialog = DIALOG_KINDS[args.kind](args.text)
    if args.title is not None:
        dialog.title(args.title)
    if args.default is not None and isinstance(dialog, Input):
        dialog.default(args.default)

    backend = _resolve_backend(args, config)
    result = dialog.show_with(backend)
    value = result.value if isinstance(result, Choice) else result

    if args.json:
        print(json.dumps({"kind": args.kind, "backend": backend.name, "result": value}))
    elif value is not None:
        console.print(Text(value))

    # cancelled entries and "no" answers share the declined status
    if result is Choice.NO or (args.kind in ("input", "password") and result is None):
        return EXIT_DECLINED
    return EXIT_OK


def _add_common_flags(parser: argparse.ArgumentParser, suppress: bool = False) -> None:
    # On subcommands the flags only set a value when given, so they never
    # reset one passed before the subcommand.
    default = {"default": argparse.SUPPRESS} if suppress else {}
    store_true = {"default": argparse.SUPPRESS} if suppress else {"default": False}
    parser.add_argument("--backend", choices=BACKEND_NAMES, help="Use this backend instead of auto-detection", **default)
    parser.add_argument("--config", help="Optional JSON config file for backend settings", **default)
    parser.add_argument("--json", action="store_true", help="Emit JSON payload", **store_true)
    parser.add_argument("-v", "--verbose", action="store_true", help="Log tool invocations", **store_true)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Show a dialog box with the best available backend")
    _add_common_flags(parser)

    sub = parser.add_subparsers(dest="kind", required=True)
    detect_parser = sub.add_parser("detect", help="Show detected environment and selected backend")
    _add_common_flags(detect_parser, suppress=True)
    for kind in DIALOG_KINDS:
        kind_parser = sub.add_parser(kind, help=f"Show a {kind} dialog")
        _add_common_flags(kind_parser, suppress=True)
        kind_parser.add_argument("text", help="Prompt text")
        kind_parser.add_argument("--title", help="Dialog title")
        if kind == "input":
            kind_parser.add_argument("--default", help="Pre-filled answer")
        else:
            kind_parser.set_defaults(default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    console = Console(highlight=False, soft_wrap=True)
    error_console = Console(stderr=True, highlight=False)

    try:
        config = resolve_config(args.config)
        if args.kind == "detect":
            return _run_detect(args, config, console)
        return _run_dialog(args, config, console)
    except (DialogError, ValueError) as exc:
        error_console.print(Text.assemble(("error: ", "red"), str(exc)))
        return EXIT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
