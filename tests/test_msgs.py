import copy

import pytest

from vehicle_sentinel.msgs import (
    Control,
    GearCommand,
    Header,
    Point,
    Quaternion,
    TurnIndicatorsCommand,
    Twist,
    TwistWithCovariance,
    TwistWithCovarianceStamped,
    Vector3,
    VelocityReport,
)


def test_default_controls_are_equal_and_independent():
    a = Control()
    b = Control()
    assert a == b
    a.lateral.steering_tire_angle = 0.5
    assert b.lateral.steering_tire_angle == Control().lateral.steering_tire_angle
    assert a != b


def test_deepcopy_of_control_is_independent():
    a = Control()
    a.longitudinal.velocity = 5.0
    b = copy.deepcopy(a)
    b.longitudinal.velocity = 10.0
    assert a.longitudinal.velocity == 5.0
    assert b.longitudinal.velocity == 10.0


def test_covariance_defaults_to_36_zeros():
    cov = TwistWithCovariance().covariance
    assert len(cov) == 36
    assert all(v == 0.0 for v in cov)


def test_covariance_of_wrong_size_rejected():
    with pytest.raises(ValueError):
        TwistWithCovariance(covariance=[0.0] * 35)


def test_default_covariance_not_shared():
    a = TwistWithCovariance()
    b = TwistWithCovariance()
    a.covariance[0] = 1.0
    assert b.covariance[0] == 0.0


def test_header_keeps_frame_id():
    report = VelocityReport(header=Header(frame_id="base_link"), longitudinal_velocity=10.0)
    assert report.header.frame_id == "base_link"
    assert report.longitudinal_velocity == 10.0


def test_stamped_twist_nesting_round_trip():
    twist = Twist(linear=Vector3(x=1.0), angular=Vector3(z=0.3))
    msg = TwistWithCovarianceStamped(twist=TwistWithCovariance(twist=twist))
    assert msg.twist.twist.linear.x == 1.0
    assert msg.twist.twist.angular.z == 0.3


def test_gear_and_indicator_commands_carry_constants():
    drive = GearCommand(command=GearCommand.DRIVE)
    reverse = GearCommand(command=GearCommand.REVERSE)
    park = GearCommand(command=GearCommand.PARK)
    left = TurnIndicatorsCommand(command=TurnIndicatorsCommand.ENABLE_LEFT)
    assert (drive.command, reverse.command, park.command) == (2, 20, 22)
    assert left.command == 2


def test_point_and_quaternion_fields():
    p = Point(3.0, 4.0, 0.0)
    q = Quaternion(0.0, 0.0, 0.0, 1.0)
    assert (p.x, p.y, p.z) == (3.0, 4.0, 0.0)
    assert q == Quaternion()