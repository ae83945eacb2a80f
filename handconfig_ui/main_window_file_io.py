from __future__ import annotations

from pathlib import Path

from PySide6.QtWidgets import QFileDialog, QMessageBox

from handconfig.sync import ConfigFileError

CONFIG_FILTER = "Configuration files (*.cfg);;All files (*)"


def open_config_dialog(window) -> None:
    path_str, _ = QFileDialog.getOpenFileName(
        window,
        "Open a configuration file",
        "",
        CONFIG_FILTER,
    )
    if not path_str:
        return
    # Go through the window method so tests can monkeypatch it.
    window._load_config(Path(path_str))  # noqa: SLF001


def save_config_dialog(window) -> None:
    path_str, _ = QFileDialog.getSaveFileName(
        window,
        "Save a configuration file",
        "",
        "Configuration files (*.cfg)",
    )
    if not path_str:
        return

    out_path = Path(path_str)
    if not out_path.suffix:
        out_path = out_path.with_suffix(".cfg")
    window._save_config(out_path)  # noqa: SLF001


def load_config(window, path: Path) -> None:
    try:
        window._sync.load_from_file(path)  # noqa: SLF001
    except ConfigFileError as e:
        QMessageBox.critical(window, "Load failed", f"Invalid configuration file: {e}")
    except OSError as e:
        QMessageBox.critical(window, "Load failed", f"Could not read {path}: {e}")
    finally:
        # Lines before a failure were applied; show what is actually live.
        window.refresh_controls()


def save_config(window, path: Path) -> None:
    try:
        window._sync.save_to_file(path)  # noqa: SLF001
    except OSError as e:
        QMessageBox.critical(window, "Save failed", f"Could not write {path}: {e}")
