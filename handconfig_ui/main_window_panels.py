from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from handconfig.catalog import BINDING_SLOTS, GESTURES, HAND_JOINTS, SKIN_TONES
from handconfig.settings import (
    CLICK_THRESHOLD_RANGE,
    OFFSET_RANGE_MM,
    OPACITY_RANGE,
    PROJ_LAYER_RANGE,
    ROTATION_RANGE_DEG,
    SettingsState,
    THRESHOLD_RANGE,
)

from handconfig_ui.setting_controls import (
    SliderRow,
    make_combo,
    set_checked_silently,
    set_combo_silently,
)

_AXES = ("X", "Y", "Z")


def build_tabs(window) -> QTabWidget:
    """Build every settings tab.

    Each control forwards user edits to `window._sync` and registers a refresher
    on `window._refreshers` that re-reads the state without dispatching.
    """

    tabs = QTabWidget()
    tabs.addTab(build_offsets_tab(window), "Offsets")
    tabs.addTab(build_bindings_tab(window), "Bindings")
    tabs.addTab(build_gestures_tab(window), "Gestures")
    tabs.addTab(build_misc_tab(window), "Display")
    return tabs


def _form_box(title: str) -> tuple[QGroupBox, QFormLayout]:
    box = QGroupBox(title)
    form = QFormLayout(box)
    form.setFieldGrowthPolicy(QFormLayout.FieldGrowthPolicy.AllNonFixedFieldsGrow)
    return box, form


def _build_hand_box(window, side: str) -> QGroupBox:
    sync = window._sync
    box, form = _form_box(f"{side.capitalize()} hand")

    offset_rows = [SliderRow(*OFFSET_RANGE_MM, unit=" mm") for _ in _AXES]
    rotation_rows = [SliderRow(*ROTATION_RANGE_DEG, unit="°") for _ in _AXES]
    for axis, row in zip(_AXES, offset_rows):
        form.addRow(f"{axis} offset", row)
    for axis, row in zip(_AXES, rotation_rows):
        form.addRow(f"{axis} rotation", row)

    disable_box = QCheckBox("Disable this hand")
    form.addRow("", disable_box)

    def on_offset(_value: int) -> None:
        sync.set_offset(side, tuple(r.value() for r in offset_rows))

    def on_rotation(_value: int) -> None:
        sync.set_rotation(side, tuple(r.value() for r in rotation_rows))

    for row in offset_rows:
        row.valueChanged.connect(on_offset)
    for row in rotation_rows:
        row.valueChanged.connect(on_rotation)
    disable_box.toggled.connect(lambda checked: sync.set_hand_disabled(side, checked))

    def refresh(state: SettingsState) -> None:
        for row, v in zip(offset_rows, getattr(state, f"{side}_offset")):
            row.set_value_silently(v)
        for row, v in zip(rotation_rows, getattr(state, f"{side}_rotation")):
            row.set_value_silently(v)
        set_checked_silently(disable_box, getattr(state, f"{side}_disabled"))

    window._refreshers.append(refresh)
    window._offset_rows[side] = offset_rows
    window._rotation_rows[side] = rotation_rows
    window._disable_boxes[side] = disable_box
    return box


def build_offsets_tab(window) -> QWidget:
    sync = window._sync
    root = QWidget()
    layout = QVBoxLayout(root)
    layout.setContentsMargins(10, 10, 10, 10)

    hands = QWidget()
    hands_layout = QHBoxLayout(hands)
    hands_layout.setContentsMargins(0, 0, 0, 0)
    hands_layout.addWidget(_build_hand_box(window, "left"), 1)
    hands_layout.addWidget(_build_hand_box(window, "right"), 1)
    layout.addWidget(hands)

    joints_box, joints_form = _form_box("Joints")
    window._grip_joint_combo = make_combo(HAND_JOINTS)
    window._aim_joint_combo = make_combo(HAND_JOINTS)
    joints_form.addRow("Grip pose joint", window._grip_joint_combo)
    joints_form.addRow("Aim pose joint", window._aim_joint_combo)
    window._grip_joint_combo.currentIndexChanged.connect(sync.set_grip_joint)
    window._aim_joint_combo.currentIndexChanged.connect(sync.set_aim_joint)
    layout.addWidget(joints_box)
    layout.addStretch(1)

    def refresh(state: SettingsState) -> None:
        set_combo_silently(window._grip_joint_combo, state.grip_joint)
        set_combo_silently(window._aim_joint_combo, state.aim_joint)

    window._refreshers.append(refresh)
    return root


def build_bindings_tab(window) -> QWidget:
    sync = window._sync
    root = QWidget()
    layout = QVBoxLayout(root)
    layout.setContentsMargins(10, 10, 10, 10)

    box, form = _form_box("Actions")
    for slot in BINDING_SLOTS:
        combo = make_combo(slot.entries)
        combo.currentIndexChanged.connect(lambda idx, key=slot.key: sync.set_binding(key, idx))
        form.addRow(slot.label, combo)
        window._binding_combos[slot.key] = combo

    note = QLabel("Text after the first space of an entry is a note and is not sent.")
    note.setWordWrap(True)
    form.addRow("", note)

    layout.addWidget(box)
    layout.addStretch(1)

    def refresh(state: SettingsState) -> None:
        for key, combo in window._binding_combos.items():
            set_combo_silently(combo, state.bindings[key])

    window._refreshers.append(refresh)
    return root


def build_gestures_tab(window) -> QWidget:
    sync = window._sync
    root = QWidget()
    layout = QVBoxLayout(root)
    layout.setContentsMargins(10, 10, 10, 10)

    box, form = _form_box("Near / far thresholds")
    for gesture in GESTURES:
        near_row = SliderRow(*THRESHOLD_RANGE)
        far_row = SliderRow(*THRESHOLD_RANGE)
        label = gesture.replace("_", " ").capitalize()
        form.addRow(f"{label} near", near_row)
        form.addRow(f"{label} far", far_row)

        def sync_pair(pair: tuple[int, int], near_row=near_row, far_row=far_row) -> None:
            # The partner may have been pushed to keep near < far.
            near_row.set_value_silently(pair[0])
            far_row.set_value_silently(pair[1])

        near_row.valueChanged.connect(lambda v, g=gesture, f=sync_pair: f(sync.set_near(g, v)))
        far_row.valueChanged.connect(lambda v, g=gesture, f=sync_pair: f(sync.set_far(g, v)))
        window._threshold_rows[gesture] = (near_row, far_row)

    layout.addWidget(box)

    click_box, click_form = _form_box("Click")
    window._click_threshold_row = SliderRow(*CLICK_THRESHOLD_RANGE, unit="%")
    window._click_threshold_row.valueChanged.connect(sync.set_click_threshold)
    click_form.addRow("Click threshold", window._click_threshold_row)
    layout.addWidget(click_box)
    layout.addStretch(1)

    def refresh(state: SettingsState) -> None:
        for gesture, (near_row, far_row) in window._threshold_rows.items():
            near, far = state.thresholds[gesture]
            near_row.set_value_silently(near)
            far_row.set_value_silently(far)
        window._click_threshold_row.set_value_silently(state.click_threshold)

    window._refreshers.append(refresh)
    return root


def build_misc_tab(window) -> QWidget:
    sync = window._sync
    root = QWidget()
    layout = QVBoxLayout(root)
    layout.setContentsMargins(10, 10, 10, 10)

    box, form = _form_box("Hand rendering")
    window._display_disable_box = QCheckBox("Do not draw the hands")
    window._display_disable_box.toggled.connect(sync.set_display_disabled)
    form.addRow("", window._display_disable_box)

    window._proj_layer_row = SliderRow(*PROJ_LAYER_RANGE)
    window._proj_layer_row.valueChanged.connect(sync.set_proj_layer_index)
    form.addRow("Projection layer", window._proj_layer_row)

    window._depth_box = QCheckBox("Force own depth buffer")
    window._depth_box.toggled.connect(sync.set_force_own_depth_buffer)
    form.addRow("", window._depth_box)

    window._skin_tone_combo = make_combo(SKIN_TONES)
    window._skin_tone_combo.currentIndexChanged.connect(sync.set_skin_tone)
    form.addRow("Skin tone", window._skin_tone_combo)

    window._opacity_row = SliderRow(*OPACITY_RANGE, unit="%")
    window._opacity_row.valueChanged.connect(sync.set_opacity)
    form.addRow("Opacity", window._opacity_row)

    layout.addWidget(box)
    layout.addStretch(1)

    def refresh(state: SettingsState) -> None:
        set_checked_silently(window._display_disable_box, state.display_disabled)
        window._proj_layer_row.set_value_silently(state.proj_layer_index)
        set_checked_silently(window._depth_box, state.force_own_depth_buffer)
        set_combo_silently(window._skin_tone_combo, state.skin_tone)
        window._opacity_row.set_value_silently(state.opacity)

    window._refreshers.append(refresh)
    return root
