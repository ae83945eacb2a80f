from __future__ import annotations

import platform
from collections.abc import Callable

import PySide6
from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import QMainWindow, QMessageBox, QWidget

from handconfig import __version__

JOINT_CONVENTION_URL = (
    "https://raw.githubusercontent.com/KhronosGroup/OpenXR-Docs/master/"
    "specification/sources/images/ext_hand_tracking_joint_convention.png"
)
GRIP_AXES_URL = (
    "https://raw.githubusercontent.com/KhronosGroup/OpenXR-Docs/master/"
    "specification/sources/images/grip_axes_diagram.png"
)


def build_menus(
    window: QMainWindow,
    *,
    on_load: Callable[[], None],
    on_save: Callable[[], None],
    on_push_all: Callable[[], None],
    on_restore_defaults: Callable[[], None],
    on_exit: Callable[[], None],
) -> None:
    file_menu = window.menuBar().addMenu("File")
    load_action = file_menu.addAction("Load…")
    load_action.triggered.connect(on_load)
    save_action = file_menu.addAction("Save…")
    save_action.triggered.connect(on_save)
    file_menu.addSeparator()
    push_action = file_menu.addAction("Push all settings")
    push_action.triggered.connect(on_push_all)
    restore_action = file_menu.addAction("Restore defaults")
    restore_action.triggered.connect(on_restore_defaults)
    file_menu.addSeparator()
    exit_action = file_menu.addAction("Exit")
    exit_action.triggered.connect(on_exit)

    help_menu = window.menuBar().addMenu("Help")

    joints_action = help_menu.addAction("Hand joint conventions…")
    joints_action.triggered.connect(lambda: open_reference(JOINT_CONVENTION_URL))

    grip_action = help_menu.addAction("Grip pose axes…")
    grip_action.triggered.connect(lambda: open_reference(GRIP_AXES_URL))

    help_menu.addSeparator()
    about_action = help_menu.addAction("About…")
    about_action.triggered.connect(lambda: show_about_dialog(window))


def open_reference(url: str) -> bool:
    return bool(QDesktopServices.openUrl(QUrl(url)))


def show_about_dialog(parent: QWidget) -> None:
    QMessageBox.about(parent, "About Hand Config", _about_text())


def _about_text() -> str:
    py_ver = platform.python_version()
    pyside_ver = getattr(PySide6, "__version__", "(unknown)")

    # Plain text so tests can assert substrings.
    return "\n".join(
        [
            f"Version: {__version__}",
            "",
            "Adjusts the hand-tracking to controller emulation layer.",
            "Changes are pushed live over UDP; File > Save keeps them.",
            "",
            f"Python: {py_ver}",
            f"PySide6 (Qt for Python): {pyside_ver}",
        ]
    )
