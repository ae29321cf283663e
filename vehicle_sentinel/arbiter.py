"""Priority-based selection of the command source that drives the vehicle."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass, field
from typing import Tuple

from .msgs import Control, GearCommand, HazardLightsCommand, TurnIndicatorsCommand


class CommandSource(enum.Enum):
    """Where the active command comes from."""

    AUTONOMOUS = "autonomous"
    EXTERNAL = "external"
    EMERGENCY = "emergency"


class GateMode(enum.Enum):
    """Operating mode of the gate."""

    AUTO = "auto"
    EXTERNAL = "external"


@dataclass
class SourceCommands:
    """All commands coming from one source."""

    control: Control = field(default_factory=Control)
    gear: GearCommand = field(default_factory=GearCommand)
    turn_indicators: TurnIndicatorsCommand = field(default_factory=TurnIndicatorsCommand)
    hazard_lights: HazardLightsCommand = field(default_factory=HazardLightsCommand)


@dataclass(frozen=True)
class ArbiterParams:
    """Deceleration settings (m/s^2, negative) of the arbiter."""

    stop_hold_accel: float = -1.5
    emergency_accel: float = -2.4


@dataclass
class SourceArbiter:
    """Holds the latest commands of each source and picks the active one."""

    params: ArbiterParams = field(default_factory=ArbiterParams)
    autonomous: SourceCommands = field(default_factory=SourceCommands)
    external: SourceCommands = field(default_factory=SourceCommands)
    emergency: SourceCommands = field(default_factory=SourceCommands)
    gate_mode: GateMode = GateMode.AUTO
    engaged: bool = False
    system_emergency: bool = False

    def select(self) -> Tuple[CommandSource, SourceCommands]:
        """Return the active source and a copy of its commands.

        A system emergency wins over everything; otherwise the gate mode
        decides between external and autonomous. When not engaged, the
        longitudinal command is replaced by a stop-hold command.
        """
        if self.system_emergency:
            return CommandSource.EMERGENCY, copy.deepcopy(self.emergency)

        if self.gate_mode is GateMode.EXTERNAL:
            source, cmds = CommandSource.EXTERNAL, copy.deepcopy(self.external)
        else:
            source, cmds = CommandSource.AUTONOMOUS, copy.deepcopy(self.autonomous)

        if not self.engaged:
            longitudinal = cmds.control.longitudinal
            longitudinal.velocity = 0.0
            longitudinal.acceleration = self.params.stop_hold_accel
            longitudinal.jerk = 0.0

        return source, cmds