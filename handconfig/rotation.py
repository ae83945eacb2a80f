from __future__ import annotations

import math


def quaternion_from_euler_degrees(x: float, y: float, z: float) -> tuple[float, float, float, float]:
    """Quaternion (x, y, z, w) from Euler angles in degrees.

    Yaw is about Y, pitch about X and roll about Z, composed in yaw-pitch-roll
    order (same convention as `System.Numerics.Quaternion.CreateFromYawPitchRoll`,
    which the runtime layer expects).
    """

    yaw = math.radians(y)
    pitch = math.radians(x)
    roll = math.radians(z)

    sr, cr = math.sin(roll * 0.5), math.cos(roll * 0.5)
    sp, cp = math.sin(pitch * 0.5), math.cos(pitch * 0.5)
    sy, cy = math.sin(yaw * 0.5), math.cos(yaw * 0.5)

    return (
        cy * sp * cr + sy * cp * sr,
        sy * cp * cr - cy * sp * sr,
        cy * cp * sr - sy * sp * cr,
        cy * cp * cr + sy * sp * sr,
    )
