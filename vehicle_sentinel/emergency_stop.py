"""Integer model of the emergency-stop deceleration profile.

Velocities are in mm/s, accelerations in mm/s^2 and the time step in ms.
Divisions truncate toward zero.
"""

from __future__ import annotations

from dataclasses import dataclass

TARGET_ACCEL_MMS2 = -2500
"""Target deceleration: -2.5 m/s^2."""

JERK_MMS3 = -1500
"""Jerk used while ramping toward the target: -1.5 m/s^3."""

DT_MS = 33
"""Time step, about 1/30 s."""


def _div_trunc(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass(frozen=True)
class DecelState:
    """Velocity (mm/s) and acceleration (mm/s^2) during an emergency stop."""

    velocity_mms: int
    acceleration_mms2: int


def decel_step(state: DecelState) -> DecelState:
    """Ramp acceleration toward the target, then integrate velocity down to 0."""
    accel = state.acceleration_mms2 + _div_trunc(JERK_MMS3 * DT_MS, 1000)
    accel = max(accel, TARGET_ACCEL_MMS2)
    velocity = state.velocity_mms + _div_trunc(accel * DT_MS, 1000)
    return DecelState(velocity_mms=max(velocity, 0), acceleration_mms2=accel)


def run_steps(state: DecelState, n: int) -> DecelState:
    """Apply ``decel_step`` ``n`` times."""
    if n < 0:
        raise ValueError(f"step count must be non-negative, got {n}")
    for _ in range(n):
        state = decel_step(state)
    return state