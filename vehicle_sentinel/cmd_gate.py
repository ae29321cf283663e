"""Vehicle command gate: source arbitration, heartbeats and command filtering."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Optional

from .arbiter import ArbiterParams, CommandSource, GateMode, SourceArbiter, SourceCommands
from .cmd_filter import FilterActivated, FilterOutput, VehicleCmdFilter
from .heartbeat import HeartbeatMonitor
from .limits import FilterParams
from .msgs import Control, GearCommand, HazardLightsCommand, TurnIndicatorsCommand


@dataclass(frozen=True)
class GateParams:
    """Settings of the gate; a heartbeat timeout of 0 disables the monitors."""

    heartbeat_timeout_ms: int
    filter: FilterParams = field(default_factory=FilterParams)
    arbiter: ArbiterParams = field(default_factory=ArbiterParams)


@dataclass
class GateDiagnostics:
    """State of the gate after one update cycle."""

    active_source: CommandSource = CommandSource.AUTONOMOUS
    is_engaged: bool = False
    is_emergency: bool = False
    autonomous_heartbeat_ok: bool = False
    external_heartbeat_ok: bool = False
    filter_activated: FilterActivated = field(default_factory=FilterActivated)


@dataclass
class GateOutput:
    """Commands leaving the gate in one cycle."""

    control: Control = field(default_factory=Control)
    gear: GearCommand = field(default_factory=GearCommand)
    turn_indicators: TurnIndicatorsCommand = field(default_factory=TurnIndicatorsCommand)
    hazard_lights: HazardLightsCommand = field(default_factory=HazardLightsCommand)
    diagnostics: GateDiagnostics = field(default_factory=GateDiagnostics)


class VehicleCmdGate:
    """Selects the active command source and filters its control command."""

    def __init__(self, params: GateParams) -> None:
        self._filter = VehicleCmdFilter(params.filter)
        self._arbiter = SourceArbiter(params=params.arbiter)
        self._auto_heartbeat = HeartbeatMonitor(params.heartbeat_timeout_ms)
        self._external_heartbeat = HeartbeatMonitor(params.heartbeat_timeout_ms)
        self._prev_timestamp_ms: Optional[int] = None

    # -- vehicle state and mode ----------------------------------------

    @property
    def current_speed(self) -> float:
        """Current vehicle speed (m/s) from odometry."""
        return self._filter.current_speed

    @current_speed.setter
    def current_speed(self, speed: float) -> None:
        self._filter.current_speed = speed

    @property
    def current_steer(self) -> float:
        """Current physical steering angle (rad)."""
        return self._filter.current_steer

    @current_steer.setter
    def current_steer(self, steer: float) -> None:
        self._filter.current_steer = steer

    @property
    def gate_mode(self) -> GateMode:
        return self._arbiter.gate_mode

    @gate_mode.setter
    def gate_mode(self, mode: GateMode) -> None:
        self._arbiter.gate_mode = mode

    @property
    def engaged(self) -> bool:
        return self._arbiter.engaged

    @engaged.setter
    def engaged(self, engaged: bool) -> None:
        self._arbiter.engaged = engaged

    @property
    def system_emergency(self) -> bool:
        """True while an emergency-stop MRM is active."""
        return self._arbiter.system_emergency

    @system_emergency.setter
    def system_emergency(self, is_emergency: bool) -> None:
        self._arbiter.system_emergency = is_emergency

    # -- command inputs --------------------------------------------------

    def set_autonomous_commands(self, cmds: SourceCommands, now_ms: int) -> None:
        """Store autonomous commands and record their heartbeat."""
        self._arbiter.autonomous = cmds
        self._auto_heartbeat.on_heartbeat(now_ms)

    def set_external_commands(self, cmds: SourceCommands, now_ms: int) -> None:
        """Store external commands and record their heartbeat."""
        self._arbiter.external = cmds
        self._external_heartbeat.on_heartbeat(now_ms)

    def set_emergency_commands(self, cmds: SourceCommands) -> None:
        """Store commands from the MRM operators."""
        self._arbiter.emergency = cmds

    # -- main cycle --------------------------------------------------------

    def update(self, now_ms: int) -> GateOutput:
        """Run one gate cycle at ``now_ms`` and return the filtered output.

        The first cycle, and any cycle without elapsed time, passes the
        selected command through and only primes the filter.
        """
        if self._prev_timestamp_ms is None:
            dt = 0.0
        else:
            dt = max(now_ms - self._prev_timestamp_ms, 0) / 1000.0
        self._prev_timestamp_ms = now_ms

        auto_ok = not self._auto_heartbeat.is_timed_out(now_ms)
        ext_ok = not self._external_heartbeat.is_timed_out(now_ms)

        source, cmds = self._arbiter.select()

        if dt > 0.0:
            filtered = self._filter.filter_all(dt, cmds.control)
        else:
            self._filter.init_prev_cmd(cmds.control)
            filtered = FilterOutput(
                control=copy.deepcopy(cmds.control), activated=FilterActivated()
            )

        return GateOutput(
            control=filtered.control,
            gear=cmds.gear,
            turn_indicators=cmds.turn_indicators,
            hazard_lights=cmds.hazard_lights,
            diagnostics=GateDiagnostics(
                active_source=source,
                is_engaged=self._arbiter.engaged,
                is_emergency=self._arbiter.system_emergency,
                autonomous_heartbeat_ok=auto_ok,
                external_heartbeat_ok=ext_ok,
                filter_activated=filtered.activated,
            ),
        )