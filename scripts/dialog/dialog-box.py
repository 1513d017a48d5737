#!/usr/bin/env python3
"""Thin compatibility entrypoint for the dialog-core command line."""

from __future__ import annotations

from dialog_core.app import main


if __name__ == "__main__":
    raise SystemExit(main())
