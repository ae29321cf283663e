"""Stateful rate limiting and clamping of control commands.

The filter remembers the previous output command and runs eight stages,
each using limits interpolated at the current vehicle speed.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .limits import (
    ACTIVATION_THRESHOLD,
    STEER_MAX,
    V_SQ_MIN,
    FilterParams,
    calc_lateral_accel,
    calc_steer_from_lat_accel,
    clamp,
    limit_diff,
)
from .msgs import Control


@dataclass(frozen=True)
class FilterActivated:
    """Which fields the filter changed by more than the activation threshold."""

    steering: bool = False
    steering_rate: bool = False
    speed: bool = False
    acceleration: bool = False
    jerk: bool = False

    @property
    def is_activated(self) -> bool:
        return (
            self.steering
            or self.steering_rate
            or self.speed
            or self.acceleration
            or self.jerk
        )


@dataclass
class FilterOutput:
    """Filtered command and the limits that acted on it."""

    control: Control = field(default_factory=Control)
    activated: FilterActivated = field(default_factory=FilterActivated)


def _changed(before: float, after: float) -> bool:
    return abs(before - after) > ACTIVATION_THRESHOLD


def _compare(original: Control, filtered: Control) -> FilterActivated:
    return FilterActivated(
        steering=_changed(
            original.lateral.steering_tire_angle, filtered.lateral.steering_tire_angle
        ),
        steering_rate=_changed(
            original.lateral.steering_tire_rotation_rate,
            filtered.lateral.steering_tire_rotation_rate,
        ),
        speed=_changed(original.longitudinal.velocity, filtered.longitudinal.velocity),
        acceleration=_changed(
            original.longitudinal.acceleration, filtered.longitudinal.acceleration
        ),
        jerk=_changed(original.longitudinal.jerk, filtered.longitudinal.jerk),
    )


class VehicleCmdFilter:
    """Limits control commands against the previous command and vehicle state.

    ``current_speed`` (m/s) and ``current_steer`` (rad) should be kept up to
    date from odometry and the steering report.
    """

    def __init__(self, params: Optional[FilterParams] = None) -> None:
        self.params = params if params is not None else FilterParams()
        self.prev_cmd = Control()
        self.current_speed = 0.0
        self.current_steer = 0.0

    def init_prev_cmd(self, cmd: Control) -> None:
        """Set the previous command without filtering."""
        self.prev_cmd = copy.deepcopy(cmd)

    def filter_all(self, dt: float, command: Control) -> FilterOutput:
        """Run all stages on ``command`` over time step ``dt`` (s)."""
        cmd = copy.deepcopy(command)

        self._limit_lateral_steer(cmd)
        self._limit_lateral_steer_rate(dt, cmd)
        self._limit_longitudinal_with_jerk(dt, cmd)
        self._limit_longitudinal_with_acc(dt, cmd)
        self._limit_longitudinal_with_vel(cmd)
        self._limit_lateral_with_lat_jerk(dt, cmd)
        self._limit_lateral_with_lat_acc(cmd)
        self._limit_actual_steer_diff(cmd)

        activated = _compare(command, cmd)
        self.prev_cmd = copy.deepcopy(cmd)
        return FilterOutput(control=cmd, activated=activated)

    # -- helpers ------------------------------------------------------

    def _limit(self, limits: Sequence[float]) -> float:
        return self.params.interpolate(limits, self.current_speed)

    def _v_sq(self) -> float:
        return max(self.current_speed * self.current_speed, V_SQ_MIN)

    # -- stages -------------------------------------------------------

    def _limit_lateral_steer(self, cmd: Control) -> None:
        lim = min(self._limit(self.params.steer_lim), STEER_MAX)
        cmd.lateral.steering_tire_angle = clamp(cmd.lateral.steering_tire_angle, -lim, lim)

    def _limit_lateral_steer_rate(self, dt: float, cmd: Control) -> None:
        steer_rate_lim = self._limit(self.params.steer_rate_lim)
        jerk_derived = (
            self.params.lat_jerk_lim_for_steer_rate * self.params.wheel_base / self._v_sq()
        )
        effective = min(steer_rate_lim, jerk_derived)
        cmd.lateral.steering_tire_angle = limit_diff(
            cmd.lateral.steering_tire_angle,
            self.prev_cmd.lateral.steering_tire_angle,
            effective * dt,
        )
        cmd.lateral.steering_tire_rotation_rate = clamp(
            cmd.lateral.steering_tire_rotation_rate, -effective, effective
        )

    def _limit_longitudinal_with_jerk(self, dt: float, cmd: Control) -> None:
        jerk_lim = self._limit(self.params.lon_jerk_lim)
        cmd.longitudinal.acceleration = limit_diff(
            cmd.longitudinal.acceleration,
            self.prev_cmd.longitudinal.acceleration,
            jerk_lim * dt,
        )
        cmd.longitudinal.jerk = clamp(cmd.longitudinal.jerk, -jerk_lim, jerk_lim)

    def _limit_longitudinal_with_acc(self, dt: float, cmd: Control) -> None:
        acc_lim = self._limit(self.params.lon_acc_lim)
        cmd.longitudinal.acceleration = clamp(cmd.longitudinal.acceleration, -acc_lim, acc_lim)
        cmd.longitudinal.velocity = limit_diff(
            cmd.longitudinal.velocity,
            self.prev_cmd.longitudinal.velocity,
            acc_lim * dt,
        )

    def _limit_longitudinal_with_vel(self, cmd: Control) -> None:
        vel_lim = self.params.vel_lim
        cmd.longitudinal.velocity = clamp(cmd.longitudinal.velocity, -vel_lim, vel_lim)

    def _limit_lateral_with_lat_jerk(self, dt: float, cmd: Control) -> None:
        lat_jerk_lim = self._limit(self.params.lat_jerk_lim)
        v_sq = self._v_sq()
        wheel_base = self.params.wheel_base

        prev_lat_acc = calc_lateral_accel(
            v_sq, self.prev_cmd.lateral.steering_tire_angle, wheel_base
        )
        curr_lat_acc = calc_lateral_accel(v_sq, cmd.lateral.steering_tire_angle, wheel_base)

        lat_acc_max = prev_lat_acc + lat_jerk_lim * dt
        lat_acc_min = prev_lat_acc - lat_jerk_lim * dt

        if curr_lat_acc > lat_acc_max:
            cmd.lateral.steering_tire_angle = calc_steer_from_lat_accel(
                lat_acc_max, v_sq, wheel_base
            )
        elif curr_lat_acc < lat_acc_min:
            cmd.lateral.steering_tire_angle = calc_steer_from_lat_accel(
                lat_acc_min, v_sq, wheel_base
            )

    def _limit_lateral_with_lat_acc(self, cmd: Control) -> None:
        lat_acc_lim = self._limit(self.params.lat_acc_lim)
        v_sq = self._v_sq()
        wheel_base = self.params.wheel_base

        lat_acc = calc_lateral_accel(v_sq, cmd.lateral.steering_tire_angle, wheel_base)
        if abs(lat_acc) > lat_acc_lim:
            sign = 1.0 if lat_acc >= 0.0 else -1.0
            cmd.lateral.steering_tire_angle = sign * abs(
                calc_steer_from_lat_accel(lat_acc_lim, v_sq, wheel_base)
            )

    def _limit_actual_steer_diff(self, cmd: Control) -> None:
        diff_lim = self._limit(self.params.steer_diff_lim)
        cmd.lateral.steering_tire_angle = limit_diff(
            cmd.lateral.steering_tire_angle, self.current_steer, diff_lim
        )