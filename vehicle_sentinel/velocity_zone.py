"""Classification of a scaled velocity into forward, reverse or dead zone."""

from __future__ import annotations

import enum

DEAD_ZONE_THRESHOLD = 10
"""Dead-zone half width in mm/s (0.01 m/s)."""


class VelocityZone(enum.Enum):
    """Direction of motion implied by a velocity."""

    FORWARD = "forward"
    REVERSE = "reverse"
    DEAD_ZONE = "dead_zone"


def velocity_zone(v_scaled: int) -> VelocityZone:
    """Classify a velocity given in mm/s."""
    if v_scaled > DEAD_ZONE_THRESHOLD:
        return VelocityZone.FORWARD
    if v_scaled < -DEAD_ZONE_THRESHOLD:
        return VelocityZone.REVERSE
    return VelocityZone.DEAD_ZONE