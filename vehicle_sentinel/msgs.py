"""Plain message types shared by the vehicle utilities and the command gate."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, List

COVARIANCE_SIZE = 36


@dataclass
class Point:
    """A position in 3D space (m)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Vector3:
    """A free 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Quaternion:
    """An orientation quaternion; the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass
class Header:
    """Time stamp and coordinate frame of a message."""

    sec: int = 0
    nanosec: int = 0
    frame_id: str = ""


@dataclass
class Twist:
    """Linear and angular velocity."""

    linear: Vector3 = field(default_factory=Vector3)
    angular: Vector3 = field(default_factory=Vector3)


def _zero_covariance() -> List[float]:
    return [0.0] * COVARIANCE_SIZE


@dataclass
class TwistWithCovariance:
    """A twist with a row-major 6x6 covariance matrix."""

    twist: Twist = field(default_factory=Twist)
    covariance: List[float] = field(default_factory=_zero_covariance)

    def __post_init__(self) -> None:
        if len(self.covariance) != COVARIANCE_SIZE:
            raise ValueError(
                f"covariance must hold {COVARIANCE_SIZE} values, got {len(self.covariance)}"
            )
        self.covariance = [float(v) for v in self.covariance]


@dataclass
class TwistWithCovarianceStamped:
    """A twist with covariance and a header."""

    header: Header = field(default_factory=Header)
    twist: TwistWithCovariance = field(default_factory=TwistWithCovariance)


@dataclass
class VelocityReport:
    """Vehicle velocity as reported by the vehicle interface."""

    header: Header = field(default_factory=Header)
    longitudinal_velocity: float = 0.0
    lateral_velocity: float = 0.0
    heading_rate: float = 0.0


@dataclass
class Lateral:
    """Lateral part of a control command."""

    steering_tire_angle: float = 0.0
    steering_tire_rotation_rate: float = 0.0


@dataclass
class Longitudinal:
    """Longitudinal part of a control command."""

    velocity: float = 0.0
    acceleration: float = 0.0
    jerk: float = 0.0


@dataclass
class Control:
    """A combined lateral and longitudinal control command."""

    lateral: Lateral = field(default_factory=Lateral)
    longitudinal: Longitudinal = field(default_factory=Longitudinal)


@dataclass
class GearCommand:
    """Requested gear."""

    NONE: ClassVar[int] = 0
    DRIVE: ClassVar[int] = 2
    REVERSE: ClassVar[int] = 20
    PARK: ClassVar[int] = 22

    command: int = 0


@dataclass
class TurnIndicatorsCommand:
    """Requested turn indicator state."""

    NO_COMMAND: ClassVar[int] = 0
    DISABLE: ClassVar[int] = 1
    ENABLE_LEFT: ClassVar[int] = 2
    ENABLE_RIGHT: ClassVar[int] = 3

    command: int = 0


@dataclass
class HazardLightsCommand:
    """Requested hazard light state."""

    NO_COMMAND: ClassVar[int] = 0
    DISABLE: ClassVar[int] = 1
    ENABLE: ClassVar[int] = 2

    command: int = 0