"""Speed-indexed limits and the scalar helpers of the command filter."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from itertools import pairwise
from typing import Sequence, Tuple

NUM_POINTS = 4
"""Number of reference speed points used for limit interpolation."""

DEFAULT_REFERENCE_SPEEDS: Tuple[float, ...] = (0.1, 0.3, 20.0, 30.0)
"""Default reference speed points (m/s)."""

ACTIVATION_THRESHOLD = 1e-3
"""Change above which a filtered field counts as limited."""

V_SQ_MIN = 0.001
"""Smallest squared speed used in divisions."""

STEER_MAX = math.pi / 2.0
"""Largest absolute steering angle the filter handles (rad)."""

_SPEED_INDEXED = (
    "reference_speeds",
    "lon_acc_lim",
    "lon_jerk_lim",
    "steer_lim",
    "steer_rate_lim",
    "steer_diff_lim",
    "lat_acc_lim",
    "lat_jerk_lim",
)


@dataclass(frozen=True)
class FilterParams:
    """Limits of the command filter.

    Every tuple except ``reference_speeds`` holds one limit per reference
    speed point; values in between are interpolated linearly.
    """

    wheel_base: float = 2.79
    vel_lim: float = 25.0
    reference_speeds: Tuple[float, ...] = DEFAULT_REFERENCE_SPEEDS
    lon_acc_lim: Tuple[float, ...] = (5.0, 5.0, 5.0, 4.0)
    lon_jerk_lim: Tuple[float, ...] = (80.0, 5.0, 5.0, 4.0)
    steer_lim: Tuple[float, ...] = (1.0, 1.0, 1.0, 0.8)
    steer_rate_lim: Tuple[float, ...] = (1.0, 1.0, 1.0, 0.8)
    steer_diff_lim: Tuple[float, ...] = (1.0, 1.0, 1.0, 0.8)
    lat_acc_lim: Tuple[float, ...] = (5.0, 5.0, 5.0, 4.0)
    lat_jerk_lim: Tuple[float, ...] = (7.0, 7.0, 7.0, 6.0)
    lat_jerk_lim_for_steer_rate: float = 5.0

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name not in _SPEED_INDEXED:
                continue
            values = tuple(float(v) for v in getattr(self, f.name))
            if len(values) != NUM_POINTS:
                raise ValueError(
                    f"{f.name} must hold {NUM_POINTS} values, got {len(values)}"
                )
            object.__setattr__(self, f.name, values)

    def interpolate(self, limits: Sequence[float], speed: float) -> float:
        """Limit from ``limits`` at the absolute value of ``speed``."""
        return interpolate_from_speed(abs(speed), self.reference_speeds, limits)


def interpolate_from_speed(
    speed: float, reference: Sequence[float], limits: Sequence[float]
) -> float:
    """Linear interpolation of ``limits`` over ``reference`` speeds.

    Below the first and above the last point the boundary value is held.
    """
    if not reference or len(reference) != len(limits):
        raise ValueError(
            "reference and limits must be non-empty and of equal length, "
            f"got {len(reference)} and {len(limits)}"
        )
    if speed <= reference[0]:
        return limits[0]
    if speed >= reference[-1]:
        return limits[-1]
    for (r0, r1), (l0, l1) in zip(pairwise(reference), pairwise(limits)):
        if r0 <= speed < r1:
            denom = max(r1 - r0, 1e-5)
            ratio = clamp((speed - r0) / denom, 0.0, 1.0)
            return l0 + ratio * (l1 - l0)
    return limits[-1]


def calc_lateral_accel(v_sq: float, steer: float, wheel_base: float) -> float:
    """Lateral acceleration v^2 * tan(steer) / wheel_base."""
    return v_sq * math.tan(steer) / wheel_base


def calc_steer_from_lat_accel(lat_acc: float, v_sq: float, wheel_base: float) -> float:
    """Steering angle that gives ``lat_acc`` at squared speed ``v_sq``."""
    return math.atan(lat_acc * wheel_base / max(v_sq, V_SQ_MIN))


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to ``[lo, hi]``."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def limit_diff(curr: float, prev: float, limit: float) -> float:
    """Move from ``prev`` toward ``curr`` by at most ``limit``."""
    return prev + clamp(curr - prev, -limit, limit)