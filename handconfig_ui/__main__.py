from __future__ import annotations

import logging
import sys

from handconfig.log import configure_logging


def main() -> int:
    """Entry point for `python -m handconfig_ui`."""

    configure_logging(logging.DEBUG if "--verbose" in sys.argv else logging.WARNING)

    try:
        from handconfig_ui.app import run_app
    except ImportError as e:
        # Common first-run experience: PySide6 not installed.
        sys.stderr.write(
            "Hand Config UI requires PySide6. Install it (e.g. `pip install PySide6`)\n"
        )
        sys.stderr.write(f"ImportError: {e}\n")
        return 2

    return run_app(argv=sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
