from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Install a single stream handler on the `handconfig` logger tree.

    Safe to call more than once (the handler is only added the first time).
    """

    root = logging.getLogger("handconfig")
    root.setLevel(level)
    if not any(getattr(h, "_handconfig", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._handconfig = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    return root
