"""State machine of the minimal-risk-maneuver (MRM) handler."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace


class MrmState(enum.Enum):
    """Progress of a minimal-risk maneuver."""

    NORMAL = "normal"
    OPERATING = "operating"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class MrmBehavior(enum.Enum):
    """Maneuver being carried out."""

    NONE = "none"
    COMFORTABLE_STOP = "comfortable_stop"
    EMERGENCY_STOP = "emergency_stop"


_BEHAVIOR_ORDER = {
    MrmBehavior.NONE: 0,
    MrmBehavior.COMFORTABLE_STOP: 1,
    MrmBehavior.EMERGENCY_STOP: 2,
}


@dataclass(frozen=True)
class MrmHandlerState:
    """State, active behavior and whether the vehicle is stopped."""

    state: MrmState = MrmState.NORMAL
    current_behavior: MrmBehavior = MrmBehavior.NONE
    velocity_is_zero: bool = False


def behavior_ord(behavior: MrmBehavior) -> int:
    """Escalation rank: none < comfortable stop < emergency stop."""
    return _BEHAVIOR_ORDER[behavior]


def is_valid_state(handler: MrmHandlerState) -> bool:
    """Check that state and behavior are consistent.

    NORMAL has no behavior, OPERATING has one, and SUCCEEDED requires the
    vehicle to be stopped.
    """
    if handler.state is MrmState.NORMAL and handler.current_behavior is not MrmBehavior.NONE:
        return False
    if handler.state is MrmState.OPERATING and handler.current_behavior is MrmBehavior.NONE:
        return False
    if handler.state is MrmState.SUCCEEDED and not handler.velocity_is_zero:
        return False
    return True


def transition(
    handler: MrmHandlerState,
    operation_available: bool,
    comfortable_stop_available: bool,
    velocity_is_zero: bool,
) -> MrmHandlerState:
    """Return the handler state after one update.

    Losing operation starts a comfortable stop if available, else an
    emergency stop. While operating, recovery returns to NORMAL, a stopped
    vehicle means SUCCEEDED, and a comfortable stop that is no longer
    available escalates to an emergency stop. SUCCEEDED and FAILED are final.
    """
    h = replace(handler, velocity_is_zero=velocity_is_zero)

    if h.state is MrmState.NORMAL:
        if operation_available:
            return h
        behavior = (
            MrmBehavior.COMFORTABLE_STOP
            if comfortable_stop_available
            else MrmBehavior.EMERGENCY_STOP
        )
        return replace(h, state=MrmState.OPERATING, current_behavior=behavior)

    if h.state is MrmState.OPERATING:
        if operation_available:
            return replace(h, state=MrmState.NORMAL, current_behavior=MrmBehavior.NONE)
        if h.velocity_is_zero:
            return replace(h, state=MrmState.SUCCEEDED)
        if (
            h.current_behavior is MrmBehavior.COMFORTABLE_STOP
            and not comfortable_stop_available
        ):
            return replace(h, current_behavior=MrmBehavior.EMERGENCY_STOP)
        return h

    return h