"""Vehicle geometry parameters and the offsets derived from them."""

from __future__ import annotations

from dataclasses import dataclass

MIN_POSITIVE = 1e-6


def _at_least_min(value: float) -> float:
    return MIN_POSITIVE if abs(value) < MIN_POSITIVE else value


@dataclass(frozen=True)
class VehicleInfo:
    """Vehicle geometry; derived offsets are relative to the rear axle center.

    ``wheel_base_m`` and ``max_steer_angle_rad`` are raised to at least 1e-6
    in magnitude so controllers never divide by zero.
    """

    wheel_radius_m: float = 0.39
    wheel_width_m: float = 0.42
    wheel_base_m: float = 2.74
    wheel_tread_m: float = 1.63
    front_overhang_m: float = 1.0
    rear_overhang_m: float = 1.03
    left_overhang_m: float = 0.1
    right_overhang_m: float = 0.1
    vehicle_height_m: float = 2.5
    max_steer_angle_rad: float = 0.70

    def __post_init__(self) -> None:
        object.__setattr__(self, "wheel_base_m", _at_least_min(self.wheel_base_m))
        object.__setattr__(
            self, "max_steer_angle_rad", _at_least_min(self.max_steer_angle_rad)
        )

    @property
    def vehicle_length_m(self) -> float:
        return self.front_overhang_m + self.wheel_base_m + self.rear_overhang_m

    @property
    def vehicle_width_m(self) -> float:
        return self.wheel_tread_m + self.left_overhang_m + self.right_overhang_m

    @property
    def min_longitudinal_offset_m(self) -> float:
        return -self.rear_overhang_m

    @property
    def max_longitudinal_offset_m(self) -> float:
        return self.front_overhang_m + self.wheel_base_m

    @property
    def min_lateral_offset_m(self) -> float:
        return -(self.wheel_tread_m / 2.0 + self.right_overhang_m)

    @property
    def max_lateral_offset_m(self) -> float:
        return self.wheel_tread_m / 2.0 + self.left_overhang_m

    @property
    def min_height_offset_m(self) -> float:
        return 0.0

    @property
    def max_height_offset_m(self) -> float:
        return self.vehicle_height_m