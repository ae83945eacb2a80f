from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# Combo entries are "<value> <note>"; only the text before the first space is
# sent to the runtime. Entry 0 is the empty binding.
ACTIONS: tuple[str, ...] = (
    " (none)",
    "/input/menu/click",
    "/input/trigger/value",
    "/input/squeeze/value",
    "/input/x/click (left controller)",
    "/input/y/click (left controller)",
    "/input/a/click (right controller)",
    "/input/thumbstick/click",
    "/input/b/click",
    "/input/trackpad/click (not on HP Reverb)",
    "/input/system/click (may be reserved by the runtime)",
)

INTERACTION_PROFILES: tuple[str, ...] = (
    "/interaction_profiles/microsoft/motion_controller (Windows Mixed Reality)",
    "/interaction_profiles/hp/mixed_reality_controller (HP Reverb)",
    "/interaction_profiles/oculus/touch_controller (Oculus Touch)",
    "/interaction_profiles/valve/index_controller (Valve Index)",
    "/interaction_profiles/khr/simple_controller (generic)",
)

# XrHandJointEXT order.
HAND_JOINTS: tuple[str, ...] = (
    "Palm",
    "Wrist",
    "Thumb metacarpal",
    "Thumb proximal",
    "Thumb distal",
    "Thumb tip",
    "Index metacarpal",
    "Index proximal",
    "Index intermediate",
    "Index distal",
    "Index tip",
    "Middle metacarpal",
    "Middle proximal",
    "Middle intermediate",
    "Middle distal",
    "Middle tip",
    "Ring metacarpal",
    "Ring proximal",
    "Ring intermediate",
    "Ring distal",
    "Ring tip",
    "Little metacarpal",
    "Little proximal",
    "Little intermediate",
    "Little distal",
    "Little tip",
)

SKIN_TONES: tuple[str, ...] = ("Bright", "Medium", "Dark", "Darker")

GESTURES: tuple[str, ...] = (
    "pinch",
    "thumb_press",
    "index_bend",
    "squeeze",
    "wrist_tap",
    "palm_tap",
    "index_tip_tap",
)


@dataclass(frozen=True)
class BindingSlot:
    key: str
    label: str
    entries: tuple[str, ...]
    default_index: int


# Two-handed gestures (index tip tap) only exist on the left hand: the right
# index tip is the one doing the tapping.
BINDING_SLOTS: tuple[BindingSlot, ...] = (
    BindingSlot("left.pinch", "Left pinch", ACTIONS, 2),
    BindingSlot("left.thumb_press", "Left thumb press", ACTIONS, 0),
    BindingSlot("left.index_bend", "Left index bend", ACTIONS, 0),
    BindingSlot("left.squeeze", "Left squeeze", ACTIONS, 3),
    BindingSlot("left.wrist_tap", "Left wrist tap", ACTIONS, 1),
    BindingSlot("left.palm_tap", "Left palm tap", ACTIONS, 0),
    BindingSlot("left.index_tip_tap", "Left index tip tap", ACTIONS, 8),
    BindingSlot("right.pinch", "Right pinch", ACTIONS, 2),
    BindingSlot("right.thumb_press", "Right thumb press", ACTIONS, 0),
    BindingSlot("right.index_bend", "Right index bend", ACTIONS, 0),
    BindingSlot("right.squeeze", "Right squeeze", ACTIONS, 3),
    BindingSlot("right.wrist_tap", "Right wrist tap", ACTIONS, 0),
    BindingSlot("right.palm_tap", "Right palm tap", ACTIONS, 0),
    BindingSlot("interaction_profile", "Interaction profile", INTERACTION_PROFILES, 1),
)

BINDING_SLOTS_BY_KEY: dict[str, BindingSlot] = {s.key: s for s in BINDING_SLOTS}


def strip_annotation(entry: str) -> str:
    """Return the bare value of a combo entry ("<value> <note>" -> "<value>")."""

    return entry.split(" ", 1)[0]


def index_of_action(entries: Sequence[str], name: str) -> int | None:
    for i, entry in enumerate(entries):
        if strip_annotation(entry) == name:
            return i
    return None
