from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from handconfig.catalog import BINDING_SLOTS, GESTURES, strip_annotation, index_of_action
from handconfig.rotation import quaternion_from_euler_degrees
from handconfig.settings import SettingsState

OFFSET_SCALE = 1000.0  # mm -> m
THRESHOLD_SCALE = 1000.0
CLICK_THRESHOLD_SCALE = 100.0
OPACITY_SCALE = 100.0

# Bias applied when truncating opacity back to an integer, so that e.g. "0.29"
# does not land on 28 because of binary rounding.
OPACITY_LOAD_EPSILON = 1e-4


class UnknownActionError(ValueError):
    def __init__(self, key: str, action: str) -> None:
        super().__init__(f"Action does not exist: {action}")
        self.key = key
        self.action = action


@dataclass(frozen=True)
class SettingCodec:
    encode: Callable[[SettingsState], str]
    decode: Callable[[SettingsState, str], None]


def format_number(value: float) -> str:
    """Compact decimal text: 0.5, 0.05, 0, 0.7071068 (never "-0")."""

    return f"{round(float(value), 7) + 0.0:.7g}"


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def parse_bool(value: str) -> bool:
    return value in ("1", "true")


def _number(text: str) -> float:
    v = float(text)
    if not math.isfinite(v):
        raise ValueError(f"not a finite number: {text!r}")
    return v


def _numbers(value: str, count: int) -> list[float]:
    parts = value.split()
    if len(parts) != count:
        raise ValueError(f"expected {count} numbers, got {value!r}")
    return [_number(p) for p in parts]


def _scaled(value: str, scale: float) -> int:
    return int(round(_number(value) * scale))


# Offsets.


def _offset_codec(side: str) -> SettingCodec:
    def encode(state: SettingsState) -> str:
        mm = getattr(state, f"{side}_offset")
        return " ".join(format_number(v / OFFSET_SCALE) for v in mm)

    def decode(state: SettingsState, value: str) -> None:
        state.set_offset(side, tuple(int(round(v * OFFSET_SCALE)) for v in _numbers(value, 3)))

    return SettingCodec(encode, decode)


# Rotations. The Euler triple is what the UI edits (a quaternion has several
# Euler representations); the runtime only reads the quaternion.


def _euler_codec(side: str) -> SettingCodec:
    def encode(state: SettingsState) -> str:
        return " ".join(str(v) for v in getattr(state, f"{side}_rotation"))

    def decode(state: SettingsState, value: str) -> None:
        parts = value.split()
        if len(parts) != 3:
            raise ValueError(f"expected 3 integers, got {value!r}")
        state.set_rotation(side, tuple(int(p) for p in parts))

    return SettingCodec(encode, decode)


def _quat_codec(side: str) -> SettingCodec:
    def encode(state: SettingsState) -> str:
        q = quaternion_from_euler_degrees(*getattr(state, f"{side}_rotation"))
        return " ".join(format_number(v) for v in q)

    def decode(_state: SettingsState, _value: str) -> None:
        # Derived from the Euler triple.
        return None

    return SettingCodec(encode, decode)


# Flags.


def _disable_flag_codec(attr: str) -> SettingCodec:
    # The checkbox says "disable"; the record says "enabled".
    def encode(state: SettingsState) -> str:
        return format_bool(not getattr(state, attr))

    def decode(state: SettingsState, value: str) -> None:
        setattr(state, attr, not parse_bool(value))

    return SettingCodec(encode, decode)


def _flag_codec(attr: str) -> SettingCodec:
    def encode(state: SettingsState) -> str:
        return format_bool(getattr(state, attr))

    def decode(state: SettingsState, value: str) -> None:
        setattr(state, attr, parse_bool(value))

    return SettingCodec(encode, decode)


def _index_codec(setter: str, attr: str) -> SettingCodec:
    def encode(state: SettingsState) -> str:
        return str(getattr(state, attr))

    def decode(state: SettingsState, value: str) -> None:
        getattr(state, setter)(int(value))

    return SettingCodec(encode, decode)


# Bindings.


def _binding_codec(key: str, entries: tuple[str, ...]) -> SettingCodec:
    def encode(state: SettingsState) -> str:
        return strip_annotation(entries[state.bindings[key]])

    def decode(state: SettingsState, value: str) -> None:
        idx = index_of_action(entries, value)
        if idx is None:
            state.set_binding(key, 0)
            raise UnknownActionError(key, value)
        state.set_binding(key, idx)

    return SettingCodec(encode, decode)


# Thresholds.


def _near_codec(gesture: str) -> SettingCodec:
    def encode(state: SettingsState) -> str:
        return format_number(state.thresholds[gesture][0] / THRESHOLD_SCALE)

    def decode(state: SettingsState, value: str) -> None:
        state.set_near(gesture, _scaled(value, THRESHOLD_SCALE))

    return SettingCodec(encode, decode)


def _far_codec(gesture: str) -> SettingCodec:
    def encode(state: SettingsState) -> str:
        return format_number(state.thresholds[gesture][1] / THRESHOLD_SCALE)

    def decode(state: SettingsState, value: str) -> None:
        state.set_far(gesture, _scaled(value, THRESHOLD_SCALE))

    return SettingCodec(encode, decode)


def _click_threshold_codec() -> SettingCodec:
    def encode(state: SettingsState) -> str:
        return format_number(state.click_threshold / CLICK_THRESHOLD_SCALE)

    def decode(state: SettingsState, value: str) -> None:
        state.set_click_threshold(_scaled(value, CLICK_THRESHOLD_SCALE))

    return SettingCodec(encode, decode)


def _opacity_codec() -> SettingCodec:
    def encode(state: SettingsState) -> str:
        return format_number(state.opacity / OPACITY_SCALE)

    def decode(state: SettingsState, value: str) -> None:
        state.set_opacity(int(_number(value) * OPACITY_SCALE + OPACITY_LOAD_EPSILON))

    return SettingCodec(encode, decode)


def _build_table() -> dict[str, SettingCodec]:
    # Insertion order is the flush order.
    table: dict[str, SettingCodec] = {}
    for side in ("left", "right"):
        table[f"{side}.transform.vec"] = _offset_codec(side)
    for side in ("left", "right"):
        table[f"{side}.transform.euler"] = _euler_codec(side)
        table[f"{side}.transform.quat"] = _quat_codec(side)
    table["left.enabled"] = _disable_flag_codec("left_disabled")
    table["right.enabled"] = _disable_flag_codec("right_disabled")
    table["grip_joint"] = _index_codec("set_grip_joint", "grip_joint")
    table["aim_joint"] = _index_codec("set_aim_joint", "aim_joint")
    for slot in BINDING_SLOTS:
        table[slot.key] = _binding_codec(slot.key, slot.entries)
    for gesture in GESTURES:
        table[f"{gesture}.near"] = _near_codec(gesture)
        table[f"{gesture}.far"] = _far_codec(gesture)
    table["click_threshold"] = _click_threshold_codec()
    table["display.enabled"] = _disable_flag_codec("display_disabled")
    table["proj_layer_index"] = _index_codec("set_proj_layer_index", "proj_layer_index")
    table["force_own_depth_buffer"] = _flag_codec("force_own_depth_buffer")
    table["skin_tone"] = _index_codec("set_skin_tone", "skin_tone")
    table["opacity"] = _opacity_codec()
    return table


CODECS: dict[str, SettingCodec] = _build_table()
FLUSH_ORDER: tuple[str, ...] = tuple(CODECS)


def encode_all(state: SettingsState) -> list[tuple[str, str]]:
    return [(key, CODECS[key].encode(state)) for key in FLUSH_ORDER]


def decode_into(state: SettingsState, key: str, value: str) -> bool:
    """Apply one persisted record to `state`.

    Returns False for keys this codec does not know (they are ignored).
    Raises `UnknownActionError` for bindings that name an unlisted action (the
    slot is reset to entry 0 first), and `ValueError` for malformed numbers.
    """

    codec = CODECS.get(key)
    if codec is None:
        return False
    codec.decode(state, value)
    return True
