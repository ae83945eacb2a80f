from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from handconfig.config import SyncConfig
from handconfig.sync import SettingsSynchronizer

from handconfig_ui.main_window import MainWindow
from handconfig_ui.theme import apply_theme


def run_app(argv: list[str] | None = None) -> int:
    app = QApplication(argv if argv is not None else sys.argv)
    app.setApplicationName("Hand Config")
    app.setOrganizationName("Hand Config")
    apply_theme(app)

    synchronizer = SettingsSynchronizer(SyncConfig.from_env())
    window = MainWindow(synchronizer=synchronizer)
    window.resize(760, 640)
    window.show()

    return app.exec()
