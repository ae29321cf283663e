import pytest

from vehicle_sentinel.arbiter import CommandSource, GateMode, SourceCommands
from vehicle_sentinel.cmd_gate import GateParams, VehicleCmdGate
from vehicle_sentinel.msgs import Control, Lateral, Longitudinal


def default_gate_params() -> GateParams:
    return GateParams(heartbeat_timeout_ms=500)


def make_source_commands(vel: float, accel: float, steer: float) -> SourceCommands:
    return SourceCommands(
        control=Control(
            lateral=Lateral(steering_tire_angle=steer),
            longitudinal=Longitudinal(velocity=vel, acceleration=accel),
        )
    )


def test_full_passthrough_engaged_auto_healthy_within_limits():
    gate = VehicleCmdGate(default_gate_params())
    gate.engaged = True
    gate.current_speed = 5.0
    gate.current_steer = 0.0

    gate.set_autonomous_commands(make_source_commands(5.0, 1.0, 0.1), 100)
    out = gate.update(100)
    assert out.diagnostics.active_source is CommandSource.AUTONOMOUS
    assert out.diagnostics.is_engaged

    gate.set_autonomous_commands(make_source_commands(5.0, 1.0, 0.1), 133)
    out = gate.update(133)
    assert out.control.longitudinal.velocity == pytest.approx(5.0, abs=0.01)
    assert out.control.longitudinal.acceleration == pytest.approx(1.0, abs=0.01)
    assert out.control.lateral.steering_tire_angle == pytest.approx(0.1, abs=0.01)


def test_emergency_override_through_gate():
    gate = VehicleCmdGate(default_gate_params())
    gate.engaged = True
    gate.system_emergency = True
    gate.set_autonomous_commands(make_source_commands(10.0, 1.0, 0.1), 100)
    gate.set_emergency_commands(make_source_commands(0.0, -2.4, 0.0))

    out = gate.update(100)
    assert out.diagnostics.active_source is CommandSource.EMERGENCY
    assert out.diagnostics.is_emergency
    assert out.control.longitudinal.velocity == 0.0


def test_filter_clamps_excessive_command():
    gate = VehicleCmdGate(default_gate_params())
    gate.engaged = True
    gate.current_speed = 5.0
    gate.current_steer = 0.0

    gate.set_autonomous_commands(make_source_commands(5.0, 0.0, 0.0), 100)
    gate.update(100)

    gate.set_autonomous_commands(make_source_commands(50.0, 0.0, 0.0), 133)
    out = gate.update(133)
    assert out.control.longitudinal.velocity <= 25.0
    assert out.diagnostics.filter_activated.speed


def test_heartbeat_timeout_reported_in_diagnostics():
    gate = VehicleCmdGate(default_gate_params())
    gate.engaged = True
    gate.set_autonomous_commands(make_source_commands(5.0, 0.0, 0.0), 100)

    out = gate.update(700)
    assert not out.diagnostics.autonomous_heartbeat_ok


def test_heartbeat_ok_within_timeout():
    gate = VehicleCmdGate(default_gate_params())
    gate.set_autonomous_commands(make_source_commands(5.0, 0.0, 0.0), 100)
    out = gate.update(400)
    assert out.diagnostics.autonomous_heartbeat_ok
    assert not out.diagnostics.external_heartbeat_ok


def test_disabled_heartbeat_never_times_out():
    gate = VehicleCmdGate(GateParams(heartbeat_timeout_ms=0))
    out = gate.update(100_000)
    assert out.diagnostics.autonomous_heartbeat_ok
    assert out.diagnostics.external_heartbeat_ok


def test_not_engaged_produces_stop_command():
    gate = VehicleCmdGate(default_gate_params())
    gate.current_speed = 5.0
    gate.set_autonomous_commands(make_source_commands(10.0, 1.0, 0.1), 100)

    out = gate.update(100)
    assert not out.diagnostics.is_engaged
    assert out.control.longitudinal.velocity == 0.0
    assert out.control.longitudinal.acceleration < 0.0


def test_first_update_is_not_filtered():
    gate = VehicleCmdGate(default_gate_params())
    gate.engaged = True
    gate.set_autonomous_commands(make_source_commands(50.0, 0.0, 0.0), 100)
    out = gate.update(100)
    assert out.control.longitudinal.velocity == 50.0
    assert not out.diagnostics.filter_activated.is_activated


def test_external_mode_selects_external_commands():
    gate = VehicleCmdGate(default_gate_params())
    gate.engaged = True
    gate.gate_mode = GateMode.EXTERNAL
    gate.set_autonomous_commands(make_source_commands(10.0, 1.0, 0.1), 100)
    gate.set_external_commands(make_source_commands(5.0, 0.5, 0.2), 100)

    out = gate.update(100)
    assert out.diagnostics.active_source is CommandSource.EXTERNAL
    assert out.control.longitudinal.velocity == 5.0
    assert out.diagnostics.external_heartbeat_ok


def test_gear_passed_from_selected_source():
    gate = VehicleCmdGate(default_gate_params())
    gate.engaged = True
    cmds = make_source_commands(5.0, 0.0, 0.0)
    cmds.gear.command = 2
    cmds.turn_indicators.command = 2
    gate.set_autonomous_commands(cmds, 100)
    out = gate.update(100)
    assert out.gear.command == 2
    assert out.turn_indicators.command == 2