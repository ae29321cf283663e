# vehicle_sentinel

A dependency-free Python library with the building blocks that sit between
an autonomous-driving planner and the vehicle: geometry helpers, message
types, a vehicle command gate with a rate-limiting filter, and small models
of the safety logic (gear selection, emergency stop, minimal-risk maneuver).

## Modules

- `vehicle_sentinel.msgs`: plain dataclasses for messages: `Point`,
  `Vector3`, `Quaternion`, `Header`, `Twist`, `TwistWithCovariance`,
  `TwistWithCovarianceStamped`, `VelocityReport`, `Lateral`,
  `Longitudinal`, `Control`, `GearCommand`, `TurnIndicatorsCommand` and
  `HazardLightsCommand`. The command classes carry their values as class
  constants, such as `GearCommand.DRIVE`, `GearCommand.REVERSE` and
  `GearCommand.PARK`.
- `vehicle_sentinel.geometry`: unit conversion (`deg2rad`, `rad2deg`,
  `kmph2mps`, `mps2kmph`), angle normalization (`normalize_radian`,
  `normalize_degree`), distances, quaternion and roll/pitch/yaw conversion
  (`get_yaw`, `get_rpy`, `create_quaternion_from_yaw`,
  `create_quaternion_from_rpy`), yaw, lateral and longitudinal deviation,
  signed curvature through three points (`calc_curvature`), linear
  interpolation, azimuth and elevation angles, and `is_driving_forward`.
- `vehicle_sentinel.vehicle_info`: `VehicleInfo`, a frozen dataclass of
  vehicle dimensions. It has defaults for a sample vehicle and properties for
  the derived length, width and offsets from the rear axle. `wheel_base_m`
  and `max_steer_angle_rad` are raised to at least `1e-6`.
- `vehicle_sentinel.velocity_converter`: `VehicleVelocityConverter` turns a
  `VelocityReport` into a `TwistWithCovarianceStamped`. It scales the
  longitudinal velocity and writes a diagonal covariance.
- `vehicle_sentinel.heartbeat`: `HeartbeatMonitor`, a timeout check for
  one source. A timeout of 0 disables it.
- `vehicle_sentinel.arbiter`: `SourceArbiter` picks the active
  `CommandSource`. A system emergency comes first, then the external source
  in `GateMode.EXTERNAL`, then the autonomous one. While not engaged, it
  replaces the longitudinal command with a stop-hold.
- `vehicle_sentinel.limits`: `FilterParams` holds limits for each speed
  point. It also has the scalar helpers `interpolate_from_speed`,
  `calc_lateral_accel`, `calc_steer_from_lat_accel`, `clamp` and
  `limit_diff`.
- `vehicle_sentinel.cmd_filter`: `VehicleCmdFilter`, an eight-stage filter.
  It limits steering angle and rate, longitudinal jerk, acceleration and
  velocity, lateral jerk and acceleration, and the step away from the
  current physical steering angle. It reports which fields it changed in a
  `FilterActivated`.
- `vehicle_sentinel.cmd_gate`: `VehicleCmdGate` combines the arbiter, the
  two heartbeat monitors and the filter into one `update(now_ms)` cycle.
- `vehicle_sentinel.velocity_zone`: `velocity_zone` sorts a velocity in
  mm/s into `VelocityZone.FORWARD`, `REVERSE` or `DEAD_ZONE` (±10 mm/s).
- `vehicle_sentinel.shift_decider`: `ShiftDecider.decide` picks a gear from
  an `AutowareState` and a velocity zone. `valid_gear` checks a gear value.
- `vehicle_sentinel.emergency_stop`: an integer model of the emergency-stop
  deceleration profile, with `DecelState`, `decel_step` and `run_steps`.
- `vehicle_sentinel.mrm_handler`: the minimal-risk-maneuver state machine,
  with `MrmState`, `MrmBehavior`, `MrmHandlerState`, `transition`,
  `is_valid_state` and `behavior_ord`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example: the command gate

```python
from vehicle_sentinel.arbiter import SourceCommands
from vehicle_sentinel.cmd_gate import GateParams, VehicleCmdGate

gate = VehicleCmdGate(GateParams(heartbeat_timeout_ms=500))
gate.engaged = True
gate.current_speed = 5.0

cmds = SourceCommands()
cmds.control.longitudinal.velocity = 50.0      # far above the 25 m/s limit

gate.set_autonomous_commands(cmds, now_ms=100)
gate.update(100)                               # first cycle: passes through, primes the filter

gate.set_autonomous_commands(cmds, now_ms=133)
out = gate.update(133)
print(out.control.longitudinal.velocity)       # rate-limited: about 5.165
print(out.diagnostics.filter_activated.speed)  # True
print(out.diagnostics.active_source)           # CommandSource.AUTONOMOUS
```

You can also set `gate.gate_mode`, `gate.system_emergency` and
`gate.current_steer` as attributes. `set_external_commands` and
`set_emergency_commands` feed the other sources.

## Example: geometry helpers

```python
from math import pi
from vehicle_sentinel.geometry import calc_distance_2d, create_quaternion_from_yaw, get_yaw
from vehicle_sentinel.msgs import Point

calc_distance_2d(Point(0.0, 0.0, 0.0), Point(3.0, 4.0, 0.0))   # 5.0
get_yaw(create_quaternion_from_yaw(pi / 4))                   # 0.785...
```

## Example: gear selection and emergency stop

```python
from vehicle_sentinel.emergency_stop import DecelState, run_steps
from vehicle_sentinel.msgs import GearCommand
from vehicle_sentinel.shift_decider import AutowareState, ShiftDecider
from vehicle_sentinel.velocity_zone import velocity_zone

decider = ShiftDecider()
decider.decide(AutowareState.DRIVING, velocity_zone(500), GearCommand.DRIVE)  # 2 (DRIVE)
decider.decide(AutowareState.DRIVING, velocity_zone(0), GearCommand.DRIVE)    # held: 2

final = run_steps(DecelState(velocity_mms=20000, acceleration_mms2=0), 300)
final.velocity_mms                                                            # 0
```

## Example: the minimal-risk-maneuver handler

```python
from vehicle_sentinel.mrm_handler import MrmBehavior, MrmHandlerState, MrmState, transition

state = MrmHandlerState(MrmState.NORMAL, MrmBehavior.NONE, False)
state = transition(
    state,
    operation_available=False,
    comfortable_stop_available=True,
    velocity_is_zero=False,
)
# state.state is MrmState.OPERATING, state.current_behavior is MrmBehavior.COMFORTABLE_STOP
```

## What it does not do

This is a library of pure computations. It has no command-line program and
no running node. It does not subscribe to or publish messages on any
middleware, and it keeps no clock of its own: callers pass the current time
in milliseconds to `VehicleCmdGate.update` and to the heartbeat methods. It
does not launch or supervise other processes. The shift decider, emergency
stop and MRM modules are state models driven by their callers. They do not
read vehicle state themselves.