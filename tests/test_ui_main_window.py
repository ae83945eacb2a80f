from __future__ import annotations

from pathlib import Path

import pytest

from handconfig.codec import FLUSH_ORDER
from handconfig.config import SyncConfig
from handconfig.sinks import RecordingSink


def _ensure_qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def window():
    _ensure_qapp()

    from handconfig.sync import SettingsSynchronizer
    from handconfig_ui.main_window import MainWindow

    live = RecordingSink()
    sync = SettingsSynchronizer(SyncConfig(), live_sink=live)
    w = MainWindow(synchronizer=sync)
    w._live = live  # type: ignore[attr-defined]
    yield w
    w.close()


def test_building_the_window_dispatches_nothing(window) -> None:
    assert window._live.records == []
    assert window._sync.initializing is False
    assert window._status_label.text() == "Ready"


def test_controls_show_defaults(window) -> None:
    assert [r.value() for r in window._offset_rows["left"]] == [0, 0, 0]
    assert window._aim_joint_combo.currentIndex() == 8
    assert window._binding_combos["left.pinch"].currentText() == "/input/trigger/value"
    assert window._binding_combos["interaction_profile"].currentIndex() == 1
    near_row, far_row = window._threshold_rows["index_bend"]
    assert (near_row.value(), far_row.value()) == (45, 70)
    assert window._click_threshold_row.value() == 75
    assert window._click_threshold_row.value_label.text() == "75%"
    assert window._opacity_row.value() == 100
    assert window._skin_tone_combo.currentText() == "Medium"


def test_moving_offset_slider_pushes_live_and_updates_status(window) -> None:
    window._offset_rows["left"][0].slider.setValue(500)

    assert window._live.records == ["left.transform.vec=0.5 0 0"]
    assert window._status_label.text() == "left.transform.vec=0.5 0 0"


def test_rotation_slider_sends_euler_and_quaternion(window) -> None:
    window._rotation_rows["right"][1].slider.setValue(90)

    keys = [r.split("=", 1)[0] for r in window._live.records]
    assert keys == ["right.transform.euler", "right.transform.quat"]


def test_near_slider_pushes_far_slider(window) -> None:
    near_row, far_row = window._threshold_rows["pinch"]
    near_row.slider.setValue(80)

    assert (near_row.value(), far_row.value()) == (80, 81)
    assert window._live.records == ["pinch.far=0.081", "pinch.near=0.08"]


def test_checkboxes_and_combos_dispatch(window) -> None:
    window._disable_boxes["left"].setChecked(True)
    window._depth_box.setChecked(True)
    window._binding_combos["left.squeeze"].setCurrentIndex(1)
    window._grip_joint_combo.setCurrentIndex(1)

    assert window._live.records == [
        "left.enabled=false",
        "force_own_depth_buffer=true",
        "left.squeeze=/input/menu/click",
        "grip_joint=1",
    ]


def test_load_via_dialog_refreshes_controls(monkeypatch, tmp_path: Path, window) -> None:
    from PySide6.QtWidgets import QFileDialog

    cfg = tmp_path / "in.cfg"
    cfg.write_text("click_threshold=0.4\nleft.transform.vec=0.1 0.2 0.3\n", encoding="utf-8")
    monkeypatch.setattr(QFileDialog, "getOpenFileName", lambda *a, **k: (str(cfg), ""))

    window._open_config_dialog()

    assert window._click_threshold_row.value() == 40
    assert [r.value() for r in window._offset_rows["left"]] == [100, 200, 300]
    assert len(window._live.records) == 2 * len(FLUSH_ORDER)
    assert window._status_label.text() == f"Loaded from {cfg}"


def test_load_dialog_cancelled_does_nothing(monkeypatch, window) -> None:
    from PySide6.QtWidgets import QFileDialog

    monkeypatch.setattr(QFileDialog, "getOpenFileName", lambda *a, **k: ("", ""))
    window._open_config_dialog()
    assert window._live.records == []


def test_load_unknown_action_shows_error_and_resets_combo(monkeypatch, tmp_path: Path, window) -> None:
    from PySide6.QtWidgets import QMessageBox

    messages: list[str] = []
    monkeypatch.setattr(QMessageBox, "critical", lambda _p, _t, text, *a, **k: messages.append(text))

    cfg = tmp_path / "bad_action.cfg"
    cfg.write_text("left.pinch=nonexistent_action\n", encoding="utf-8")
    window._load_config(cfg)

    assert messages == ["Action does not exist: nonexistent_action"]
    assert window._binding_combos["left.pinch"].currentIndex() == 0
    assert "left.pinch=" in window._live.records


def test_load_failures_show_critical_dialog(monkeypatch, tmp_path: Path, window) -> None:
    from PySide6.QtWidgets import QMessageBox

    titles: list[str] = []
    monkeypatch.setattr(QMessageBox, "critical", lambda _p, title, *a, **k: titles.append(title))

    window._load_config(tmp_path / "missing.cfg")

    bad = tmp_path / "bad.cfg"
    bad.write_text("opacity=0.3\nopacity=x\n", encoding="utf-8")
    window._load_config(bad)

    assert titles == ["Load failed", "Load failed"]
    # The line before the malformed one was applied and is shown.
    assert window._opacity_row.value() == 30


def test_load_non_utf8_and_non_finite_files_show_critical_dialog(monkeypatch, tmp_path: Path, window) -> None:
    from PySide6.QtWidgets import QMessageBox

    titles: list[str] = []
    monkeypatch.setattr(QMessageBox, "critical", lambda _p, title, *a, **k: titles.append(title))

    binary = tmp_path / "binary.cfg"
    binary.write_bytes(b"\xff\xfe=1\n")
    window._load_config(binary)

    inf = tmp_path / "inf.cfg"
    inf.write_text("opacity=inf\n", encoding="utf-8")
    window._load_config(inf)

    assert titles == ["Load failed", "Load failed"]
    assert window._opacity_row.value() == 100


def test_save_via_dialog_appends_suffix(monkeypatch, tmp_path: Path, window) -> None:
    from PySide6.QtWidgets import QFileDialog

    chosen = tmp_path / "mine"
    monkeypatch.setattr(QFileDialog, "getSaveFileName", lambda *a, **k: (str(chosen), ""))

    window._save_config_dialog()

    out = tmp_path / "mine.cfg"
    assert out.exists()
    assert out.read_text(encoding="utf-8").splitlines() == window._sync.snapshot()
    assert window._live.records == []


def test_save_failure_shows_critical_dialog(monkeypatch, tmp_path: Path, window) -> None:
    from PySide6.QtWidgets import QMessageBox

    titles: list[str] = []
    monkeypatch.setattr(QMessageBox, "critical", lambda _p, title, *a, **k: titles.append(title))

    window._save_config(tmp_path / "no_such_dir" / "x.cfg")
    assert titles == ["Save failed"]


def test_push_all_and_restore_defaults(window) -> None:
    window._opacity_row.slider.setValue(20)
    window._live.records.clear()

    window._on_push_all()
    assert len(window._live.records) == len(FLUSH_ORDER)
    assert "opacity=0.2" in window._live.records
    assert window._status_label.text() == "Pushed all settings"

    window._live.records.clear()
    window._on_restore_defaults()
    assert window._opacity_row.value() == 100
    assert "opacity=1" in window._live.records
    assert window._status_label.text() == "Restored defaults"


def test_menus_exist(window) -> None:
    titles = [a.text() for a in window.menuBar().actions()]
    assert titles == ["File", "Help"]

    file_menu = window.menuBar().actions()[0].menu()
    names = [a.text() for a in file_menu.actions() if not a.isSeparator()]
    assert names == ["Load…", "Save…", "Push all settings", "Restore defaults", "Exit"]


def test_help_actions(monkeypatch, window) -> None:
    import handconfig_ui.main_window_menus as menus
    from PySide6.QtGui import QDesktopServices
    from PySide6.QtWidgets import QMessageBox

    opened: list[str] = []
    monkeypatch.setattr(QDesktopServices, "openUrl", lambda url: opened.append(url.toString()) or True)
    assert menus.open_reference(menus.GRIP_AXES_URL) is True
    assert opened == [menus.GRIP_AXES_URL]

    about: list[str] = []
    monkeypatch.setattr(QMessageBox, "about", lambda _p, _t, text: about.append(text))
    menus.show_about_dialog(window)
    assert "Version:" in about[0]
    assert "PySide6" in about[0]


def test_threshold_group_title(window) -> None:
    from PySide6.QtWidgets import QGroupBox

    titles = [box.title() for box in window.findChildren(QGroupBox)]
    assert "Near / far thresholds" in titles
    assert not any("mm" in t for t in titles if "threshold" in t.lower())
