"""Conversion of vehicle velocity reports into twist messages with covariance."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from .msgs import (
    COVARIANCE_SIZE,
    Twist,
    TwistWithCovariance,
    TwistWithCovarianceStamped,
    Vector3,
    VelocityReport,
)

_UNOBSERVED_VARIANCE = 10000.0
_MATRIX_DIM = 6


@dataclass(frozen=True)
class VehicleVelocityConverter:
    """Turns a ``VelocityReport`` into a ``TwistWithCovarianceStamped``."""

    speed_scale_factor: float
    stddev_vx: float
    stddev_wz: float

    def _covariance(self) -> list:
        diagonal = [
            self.stddev_vx * self.stddev_vx,
            _UNOBSERVED_VARIANCE,
            _UNOBSERVED_VARIANCE,
            _UNOBSERVED_VARIANCE,
            _UNOBSERVED_VARIANCE,
            self.stddev_wz * self.stddev_wz,
        ]
        covariance = [0.0] * COVARIANCE_SIZE
        for i, value in enumerate(diagonal):
            covariance[i * _MATRIX_DIM + i] = value
        return covariance

    def convert(self, report: VelocityReport) -> TwistWithCovarianceStamped:
        """Map longitudinal and lateral velocity and heading rate to a twist.

        The scaled longitudinal velocity goes to ``linear.x``, the lateral
        velocity to ``linear.y`` and the heading rate to ``angular.z``. The
        covariance is diagonal.
        """
        twist = Twist(
            linear=Vector3(
                x=float(report.longitudinal_velocity) * self.speed_scale_factor,
                y=float(report.lateral_velocity),
                z=0.0,
            ),
            angular=Vector3(x=0.0, y=0.0, z=float(report.heading_rate)),
        )
        return TwistWithCovarianceStamped(
            header=copy.deepcopy(report.header),
            twist=TwistWithCovariance(twist=twist, covariance=self._covariance()),
        )