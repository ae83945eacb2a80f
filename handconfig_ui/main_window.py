from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from handconfig.settings import SettingsState
from handconfig.sync import SettingsSynchronizer

from handconfig_ui.main_window_file_io import (
    load_config as _load_config,
    open_config_dialog as _open_config_dialog,
    save_config as _save_config,
    save_config_dialog as _save_config_dialog,
)
from handconfig_ui.main_window_menus import build_menus
from handconfig_ui.main_window_panels import build_tabs
from handconfig_ui.setting_controls import SliderRow


class MainWindow(QMainWindow):
    def __init__(self, *, synchronizer: SettingsSynchronizer) -> None:
        super().__init__()
        self._sync = synchronizer

        # Filled in by the tab builders.
        self._refreshers: list[Callable[[SettingsState], None]] = []
        self._offset_rows: dict[str, list[SliderRow]] = {}
        self._rotation_rows: dict[str, list[SliderRow]] = {}
        self._disable_boxes: dict[str, QCheckBox] = {}
        self._binding_combos: dict[str, QComboBox] = {}
        self._threshold_rows: dict[str, tuple[SliderRow, SliderRow]] = {}

        self._build_actions()
        self._build_ui()

        self._sync.on_status = self._set_status
        self._sync.on_error = self._show_error

        self.setWindowTitle("Hand Config")
        self.refresh_controls()

    def _build_actions(self) -> None:
        build_menus(
            self,
            on_load=self._open_config_dialog,
            on_save=self._save_config_dialog,
            on_push_all=self._on_push_all,
            on_restore_defaults=self._on_restore_defaults,
            on_exit=self.close,
        )

    def _build_ui(self) -> None:
        root = QWidget()
        root_layout = QVBoxLayout(root)
        root_layout.setContentsMargins(0, 0, 0, 0)
        self.setCentralWidget(root)

        self._tabs = build_tabs(self)
        root_layout.addWidget(self._tabs, 1)

        status = QStatusBar()
        self.setStatusBar(status)
        self._status_label = QLabel("Ready")
        status.addWidget(self._status_label, 1)

    def refresh_controls(self) -> None:
        """Re-read every control from the in-memory settings (no dispatch)."""

        for refresh in self._refreshers:
            refresh(self._sync.state)

    def _set_status(self, text: str) -> None:
        self._status_label.setText(text)

    def _show_error(self, message: str) -> None:
        QMessageBox.critical(self, "Error", message)

    def _open_config_dialog(self) -> None:
        _open_config_dialog(self)

    def _save_config_dialog(self) -> None:
        _save_config_dialog(self)

    def _load_config(self, path: Path) -> None:
        _load_config(self, path)

    def _save_config(self, path: Path) -> None:
        _save_config(self, path)

    def _on_push_all(self) -> None:
        self._sync.push_all()

    def _on_restore_defaults(self) -> None:
        self._sync.restore_defaults()
        self.refresh_controls()
