"""Geometry, unit conversion and angle helpers."""

from __future__ import annotations

import math
from typing import Tuple

from .msgs import Point, Quaternion, Vector3

GRAVITY = 9.80665

_TWO_PI = 2.0 * math.pi


def deg2rad(deg: float) -> float:
    return deg * math.pi / 180.0


def rad2deg(rad: float) -> float:
    return rad * 180.0 / math.pi


def kmph2mps(kmph: float) -> float:
    return kmph * 1000.0 / 3600.0


def mps2kmph(mps: float) -> float:
    return mps * 3600.0 / 1000.0


def normalize_radian(rad: float, min_rad: float = -math.pi) -> float:
    """Normalize an angle to [min_rad, min_rad + 2*pi)."""
    max_rad = min_rad + _TWO_PI
    value = math.fmod(rad, _TWO_PI)
    if value < min_rad:
        value += _TWO_PI
    if value >= max_rad:
        value -= _TWO_PI
    return value


def normalize_degree(deg: float, min_deg: float = -180.0) -> float:
    """Normalize an angle in degrees to [min_deg, min_deg + 360)."""
    max_deg = min_deg + 360.0
    value = math.fmod(deg, 360.0)
    if value < min_deg:
        value += 360.0
    if value >= max_deg:
        value -= 360.0
    return value


def calc_squared_distance_2d(p1: Point, p2: Point) -> float:
    dx = p1.x - p2.x
    dy = p1.y - p2.y
    return dx * dx + dy * dy


def calc_distance_2d(p1: Point, p2: Point) -> float:
    return math.sqrt(calc_squared_distance_2d(p1, p2))


def calc_distance_3d(p1: Point, p2: Point) -> float:
    dx = p1.x - p2.x
    dy = p1.y - p2.y
    dz = p1.z - p2.z
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def create_quaternion(x: float, y: float, z: float, w: float) -> Quaternion:
    return Quaternion(x, y, z, w)


def get_yaw(q: Quaternion) -> float:
    """Yaw angle of a quaternion."""
    siny_cosp = 2.0 * (q.w * q.z + q.x * q.y)
    cosy_cosp = 1.0 - 2.0 * (q.y * q.y + q.z * q.z)
    return math.atan2(siny_cosp, cosy_cosp)


def create_quaternion_from_yaw(yaw: float) -> Quaternion:
    half = yaw * 0.5
    return Quaternion(0.0, 0.0, math.sin(half), math.cos(half))


def create_quaternion_from_rpy(roll: float, pitch: float, yaw: float) -> Quaternion:
    """Quaternion from roll, pitch and yaw (ZYX convention)."""
    sr, cr = math.sin(roll * 0.5), math.cos(roll * 0.5)
    sp, cp = math.sin(pitch * 0.5), math.cos(pitch * 0.5)
    sy, cy = math.sin(yaw * 0.5), math.cos(yaw * 0.5)
    return Quaternion(
        x=sr * cp * cy - cr * sp * sy,
        y=cr * sp * cy + sr * cp * sy,
        z=cr * cp * sy - sr * sp * cy,
        w=cr * cp * cy + sr * sp * sy,
    )


def get_rpy(q: Quaternion) -> Tuple[float, float, float]:
    """Return (roll, pitch, yaw) of a quaternion."""
    sinr_cosp = 2.0 * (q.w * q.x + q.y * q.z)
    cosr_cosp = 1.0 - 2.0 * (q.x * q.x + q.y * q.y)
    roll = math.atan2(sinr_cosp, cosr_cosp)

    sinp = 2.0 * (q.w * q.y - q.z * q.x)
    if abs(sinp) >= 1.0:
        pitch = math.copysign(math.pi / 2.0, sinp)
    else:
        pitch = math.asin(sinp)

    return roll, pitch, get_yaw(q)


def calc_yaw_deviation(base_yaw: float, target_yaw: float) -> float:
    """Target yaw minus base yaw, normalized to [-pi, pi)."""
    return normalize_radian(target_yaw - base_yaw, -math.pi)


def calc_lateral_deviation(base_pos: Point, base_yaw: float, target: Point) -> float:
    """Offset of target along the base pose's left-pointing lateral axis."""
    dx = target.x - base_pos.x
    dy = target.y - base_pos.y
    return -math.sin(base_yaw) * dx + math.cos(base_yaw) * dy


def calc_longitudinal_deviation(base_pos: Point, base_yaw: float, target: Point) -> float:
    """Offset of target along the base pose's heading."""
    dx = target.x - base_pos.x
    dy = target.y - base_pos.y
    return math.cos(base_yaw) * dx + math.sin(base_yaw) * dy


def calc_curvature(p1: Point, p2: Point, p3: Point) -> float:
    """Signed Menger-style curvature through three points; 0 when degenerate."""
    denom = calc_distance_2d(p1, p2) * calc_distance_2d(p2, p3) * calc_distance_2d(p1, p3)
    if denom < 1e-10:
        return 0.0
    area2 = (p2.x - p1.x) * (p3.y - p1.y) - (p2.y - p1.y) * (p3.x - p1.x)
    return area2 / denom


def lerp_point(src: Point, dst: Point, ratio: float) -> Point:
    return Point(
        src.x + (dst.x - src.x) * ratio,
        src.y + (dst.y - src.y) * ratio,
        src.z + (dst.z - src.z) * ratio,
    )


def lerp_vector3(src: Vector3, dst: Vector3, ratio: float) -> Vector3:
    return Vector3(
        src.x + (dst.x - src.x) * ratio,
        src.y + (dst.y - src.y) * ratio,
        src.z + (dst.z - src.z) * ratio,
    )


def calc_azimuth_angle(p_from: Point, p_to: Point) -> float:
    return math.atan2(p_to.y - p_from.y, p_to.x - p_from.x)


def calc_elevation_angle(p_from: Point, p_to: Point) -> float:
    return math.atan2(p_to.z - p_from.z, calc_distance_2d(p_from, p_to))


def is_driving_forward(src_yaw: float, src: Point, dst: Point) -> bool:
    """True when dst lies less than 90 degrees off the heading src_yaw."""
    dev = normalize_radian(src_yaw - calc_azimuth_angle(src, dst), -math.pi)
    return abs(dev) < math.pi / 2.0