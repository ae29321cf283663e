"""Vehicle command gating, filtering, geometry helpers and safety-state models."""

__version__ = "0.1.0"

__all__ = [
    "arbiter",
    "cmd_filter",
    "cmd_gate",
    "emergency_stop",
    "geometry",
    "heartbeat",
    "limits",
    "mrm_handler",
    "msgs",
    "shift_decider",
    "vehicle_info",
    "velocity_converter",
    "velocity_zone",
]