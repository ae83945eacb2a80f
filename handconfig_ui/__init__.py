"""PySide6 desktop panel for the hand-tracking controller emulation settings.

This package is a *client* of the headless core:

- Core stays UI-agnostic (no Qt imports under `handconfig/`).
- Every control edit goes through `handconfig.sync.SettingsSynchronizer`.

Run from source:

    python -m handconfig_ui
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
