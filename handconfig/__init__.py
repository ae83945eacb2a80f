"""Headless core for the hand-tracking controller emulation settings.

The core is UI-agnostic (no Qt imports). The desktop panel lives in
the separate UI package and drives `handconfig.sync.SettingsSynchronizer`.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
