from __future__ import annotations

import os

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication, QStyleFactory

_ACCENT_TEAL = QColor(38, 166, 154)  # focus/handle accent
_PRIMARY_PURPLE = QColor(126, 87, 194)


def _env_disabled(name: str) -> bool:
    return os.environ.get(name, "").strip() not in ("", "0", "false")


def _dark_palette() -> QPalette:
    """A conservative Fusion-friendly dark palette."""

    pal = QPalette()

    window = QColor(30, 30, 30)
    base = QColor(24, 24, 24)
    button = QColor(40, 40, 40)
    text = QColor(228, 228, 228)
    disabled_text = QColor(150, 150, 150)

    pal.setColor(QPalette.ColorRole.Window, window)
    pal.setColor(QPalette.ColorRole.WindowText, text)
    pal.setColor(QPalette.ColorRole.Base, base)
    pal.setColor(QPalette.ColorRole.AlternateBase, QColor(36, 36, 36))
    pal.setColor(QPalette.ColorRole.ToolTipBase, window)
    pal.setColor(QPalette.ColorRole.ToolTipText, text)
    pal.setColor(QPalette.ColorRole.Text, text)
    pal.setColor(QPalette.ColorRole.Button, button)
    pal.setColor(QPalette.ColorRole.ButtonText, text)
    pal.setColor(QPalette.ColorRole.Highlight, _ACCENT_TEAL)
    pal.setColor(QPalette.ColorRole.HighlightedText, QColor(15, 15, 15))

    pal.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.WindowText, disabled_text)
    pal.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.Text, disabled_text)
    pal.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.ButtonText, disabled_text)
    return pal


STYLESHEET = f"""
QWidget {{
  font-size: 13px;
}}

QStatusBar QLabel {{
  padding-left: 6px;
  padding-right: 6px;
}}

QGroupBox {{
  font-weight: 600;
  border: 1px solid rgba(255, 255, 255, 0.08);
  border-radius: 6px;
  margin-top: 10px;
  padding: 6px;
}}

QGroupBox::title {{
  subcontrol-origin: margin;
  left: 10px;
  padding: 0 4px;
}}

QComboBox {{
  border: 1px solid rgba(255, 255, 255, 0.10);
  border-radius: 6px;
  min-height: 26px;
  padding: 2px 8px;
  background: palette(base);
}}

QComboBox:focus {{
  border: 1px solid {_ACCENT_TEAL.name()};
}}

QSlider::handle:horizontal {{
  background: {_PRIMARY_PURPLE.name()};
  width: 12px;
  margin: -5px 0;
  border-radius: 6px;
}}

QSlider::handle:horizontal:focus {{
  background: {_ACCENT_TEAL.name()};
}}

/* Current-value readout next to each slider. */
QLabel[role="slider-value"] {{
  min-width: 44px;
  qproperty-alignment: AlignRight;
}}
""".strip()


def apply_theme(app: QApplication) -> None:
    """Apply the application-global dark theme.

    `HANDCONFIG_UI_THEME_DISABLE_FUSION` / `..._PALETTE` / `..._STYLESHEET`
    switch off the individual layers (useful when debugging rendering).
    """

    if not _env_disabled("HANDCONFIG_UI_THEME_DISABLE_FUSION"):
        fusion = QStyleFactory.create("Fusion")
        if fusion is not None:
            app.setStyle(fusion)
        else:
            app.setStyle("Fusion")

    if not _env_disabled("HANDCONFIG_UI_THEME_DISABLE_PALETTE"):
        app.setPalette(_dark_palette())
    if not _env_disabled("HANDCONFIG_UI_THEME_DISABLE_STYLESHEET"):
        app.setStyleSheet(STYLESHEET)
