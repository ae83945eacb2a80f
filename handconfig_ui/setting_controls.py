from __future__ import annotations

from collections.abc import Sequence

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QCheckBox, QComboBox, QHBoxLayout, QLabel, QSlider, QWidget


class SliderRow(QWidget):
    """Horizontal slider with a numeric readout of its current value."""

    valueChanged = Signal(int)

    def __init__(self, lo: int, hi: int, *, unit: str = "", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._unit = unit

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.slider = QSlider(Qt.Orientation.Horizontal)
        self.slider.setRange(lo, hi)
        self.slider.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        layout.addWidget(self.slider, 1)

        self.value_label = QLabel()
        self.value_label.setProperty("role", "slider-value")
        layout.addWidget(self.value_label)

        self.slider.valueChanged.connect(self._on_slider_changed)
        self._update_label(self.slider.value())

    def value(self) -> int:
        return int(self.slider.value())

    def set_value_silently(self, value: int) -> None:
        """Move the slider without emitting `valueChanged` (no dispatch)."""

        self.slider.blockSignals(True)
        self.slider.setValue(int(value))
        self.slider.blockSignals(False)
        self._update_label(self.slider.value())

    def _on_slider_changed(self, value: int) -> None:
        self._update_label(value)
        self.valueChanged.emit(int(value))

    def _update_label(self, value: int) -> None:
        self.value_label.setText(f"{value}{self._unit}")


def make_combo(entries: Sequence[str]) -> QComboBox:
    combo = QComboBox()
    combo.addItems(list(entries))
    combo.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
    return combo


def set_combo_silently(combo: QComboBox, index: int) -> None:
    combo.blockSignals(True)
    combo.setCurrentIndex(int(index))
    combo.blockSignals(False)


def set_checked_silently(box: QCheckBox, checked: bool) -> None:
    box.blockSignals(True)
    box.setChecked(bool(checked))
    box.blockSignals(False)
