from __future__ import annotations

from dataclasses import dataclass, field

from handconfig.catalog import (
    BINDING_SLOTS,
    BINDING_SLOTS_BY_KEY,
    HAND_JOINTS,
    SKIN_TONES,
)

OFFSET_RANGE_MM = (-1000, 1000)
ROTATION_RANGE_DEG = (-180, 180)
THRESHOLD_RANGE = (0, 1000)
CLICK_THRESHOLD_RANGE = (0, 100)
OPACITY_RANGE = (0, 100)
PROJ_LAYER_RANGE = (0, 15)

# Must stay in parity with the runtime layer's own reset values.
DEFAULT_THRESHOLDS: dict[str, tuple[int, int]] = {
    "pinch": (0, 50),
    "thumb_press": (0, 50),
    "index_bend": (45, 70),
    "squeeze": (35, 70),
    "wrist_tap": (40, 60),
    "palm_tap": (20, 60),
    "index_tip_tap": (0, 70),
}
DEFAULT_GRIP_JOINT = 0  # Palm
DEFAULT_AIM_JOINT = 8  # Index intermediate
DEFAULT_CLICK_THRESHOLD = 75
DEFAULT_SKIN_TONE = 1  # Medium
DEFAULT_OPACITY = 100


def clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, int(value)))


def _default_bindings() -> dict[str, int]:
    return {s.key: s.default_index for s in BINDING_SLOTS}


def _default_thresholds() -> dict[str, tuple[int, int]]:
    return dict(DEFAULT_THRESHOLDS)


@dataclass
class SettingsState:
    """UI-facing setting values, in UI units (mm, degrees, integer scales).

    Mutate through the setters so that range clamping and the near/far pair
    invariant hold.
    """

    left_offset: tuple[int, int, int] = (0, 0, 0)
    right_offset: tuple[int, int, int] = (0, 0, 0)
    left_rotation: tuple[int, int, int] = (0, 0, 0)
    right_rotation: tuple[int, int, int] = (0, 0, 0)
    left_disabled: bool = False
    right_disabled: bool = False
    grip_joint: int = DEFAULT_GRIP_JOINT
    aim_joint: int = DEFAULT_AIM_JOINT
    bindings: dict[str, int] = field(default_factory=_default_bindings)
    thresholds: dict[str, tuple[int, int]] = field(default_factory=_default_thresholds)
    click_threshold: int = DEFAULT_CLICK_THRESHOLD
    display_disabled: bool = False
    proj_layer_index: int = 0
    force_own_depth_buffer: bool = False
    skin_tone: int = DEFAULT_SKIN_TONE
    opacity: int = DEFAULT_OPACITY

    def set_offset(self, side: str, offset: tuple[int, int, int]) -> None:
        lo, hi = OFFSET_RANGE_MM
        value = tuple(clamp(v, lo, hi) for v in offset)
        setattr(self, _side_attr(side, "offset"), value)

    def set_rotation(self, side: str, euler: tuple[int, int, int]) -> None:
        lo, hi = ROTATION_RANGE_DEG
        value = tuple(clamp(v, lo, hi) for v in euler)
        setattr(self, _side_attr(side, "rotation"), value)

    def set_hand_disabled(self, side: str, disabled: bool) -> None:
        setattr(self, _side_attr(side, "disabled"), bool(disabled))

    def set_grip_joint(self, index: int) -> None:
        self.grip_joint = clamp(index, 0, len(HAND_JOINTS) - 1)

    def set_aim_joint(self, index: int) -> None:
        self.aim_joint = clamp(index, 0, len(HAND_JOINTS) - 1)

    def set_binding(self, key: str, index: int) -> None:
        slot = BINDING_SLOTS_BY_KEY[key]
        self.bindings[key] = clamp(index, 0, len(slot.entries) - 1)

    def set_near(self, gesture: str, near: int) -> tuple[int, int]:
        """Set a near threshold; pushes far up if the pair would collapse."""

        lo, hi = THRESHOLD_RANGE
        _, far = self.thresholds[gesture]
        near = clamp(near, lo, hi - 1)
        if near >= far:
            far = near + 1
        self.thresholds[gesture] = (near, far)
        return near, far

    def set_far(self, gesture: str, far: int) -> tuple[int, int]:
        """Set a far threshold; pulls near down if the pair would collapse."""

        lo, hi = THRESHOLD_RANGE
        near, _ = self.thresholds[gesture]
        far = clamp(far, lo + 1, hi)
        if far <= near:
            near = far - 1
        self.thresholds[gesture] = (near, far)
        return near, far

    def set_click_threshold(self, value: int) -> None:
        self.click_threshold = clamp(value, *CLICK_THRESHOLD_RANGE)

    def set_display_disabled(self, disabled: bool) -> None:
        self.display_disabled = bool(disabled)

    def set_proj_layer_index(self, value: int) -> None:
        self.proj_layer_index = clamp(value, *PROJ_LAYER_RANGE)

    def set_force_own_depth_buffer(self, forced: bool) -> None:
        self.force_own_depth_buffer = bool(forced)

    def set_skin_tone(self, index: int) -> None:
        self.skin_tone = clamp(index, 0, len(SKIN_TONES) - 1)

    def set_opacity(self, value: int) -> None:
        self.opacity = clamp(value, *OPACITY_RANGE)

    def reset(self) -> None:
        """Restore every field to its default in place."""

        defaults = SettingsState()
        for name in self.__dataclass_fields__:
            setattr(self, name, getattr(defaults, name))


def _side_attr(side: str, suffix: str) -> str:
    if side not in ("left", "right"):
        raise ValueError(f"side must be 'left' or 'right' (got {side!r})")
    return f"{side}_{suffix}"
