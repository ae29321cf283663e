"""Gear selection from the Autoware state and the direction of motion."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .msgs import GearCommand
from .velocity_zone import VelocityZone

DRIVE = GearCommand.DRIVE
REVERSE = GearCommand.REVERSE
PARK = GearCommand.PARK


class AutowareState(enum.IntEnum):
    """Autoware states the shift decider reacts to."""

    WAITING_FOR_ROUTE = 2
    PLANNING = 3
    DRIVING = 5
    ARRIVED_GOAL = 6


def valid_gear(gear: int) -> bool:
    """True for DRIVE, REVERSE and PARK."""
    return gear in (DRIVE, REVERSE, PARK)


@dataclass
class ShiftDecider:
    """Chooses the gear command and remembers the last one it issued."""

    park_on_goal: bool = True
    prev_command: int = DRIVE

    def decide(self, autoware_state: int, zone: VelocityZone, current_gear: int) -> int:
        """Return the gear to command and record it as the previous command.

        While driving the gear follows the direction of motion and holds the
        previous command in the dead zone, so DRIVE never turns straight into
        REVERSE. At the goal or while waiting for a route the vehicle parks
        if ``park_on_goal`` is set; otherwise the current gear is kept.
        """
        if autoware_state == AutowareState.DRIVING:
            if zone is VelocityZone.FORWARD:
                command = DRIVE
            elif zone is VelocityZone.REVERSE:
                command = REVERSE
            else:
                command = self.prev_command
        elif (
            autoware_state in (AutowareState.ARRIVED_GOAL, AutowareState.WAITING_FOR_ROUTE)
            and self.park_on_goal
        ):
            command = PARK
        else:
            command = current_gear
        self.prev_command = command
        return command