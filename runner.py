"""Repo-root convenience shim for launching the Hand Config panel.

    python runner.py

It delegates to the canonical UI entry point:

    python -m handconfig_ui
"""

from __future__ import annotations

import sys


def main() -> int:
    """Launch the panel. Arguments are forwarded as in `python -m handconfig_ui`."""

    # `handconfig_ui.__main__.main()` prints the PySide6-missing message itself.
    from handconfig_ui.__main__ import main as ui_main

    sys.argv = ["handconfig_ui", *sys.argv[1:]]

    return ui_main()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
