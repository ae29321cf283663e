"""Timeout-based liveness monitor for one command source."""

from __future__ import annotations

from typing import Optional


class HeartbeatMonitor:
    """Tracks the last heartbeat of a source; a timeout of 0 disables it."""

    def __init__(self, timeout_ms: int) -> None:
        if timeout_ms < 0:
            raise ValueError(f"timeout_ms must be non-negative, got {timeout_ms}")
        self.timeout_ms = timeout_ms
        self.last_received_ms: Optional[int] = None

    def on_heartbeat(self, now_ms: int) -> None:
        """Record that a heartbeat arrived at ``now_ms``."""
        self.last_received_ms = now_ms

    def is_timed_out(self, now_ms: int) -> bool:
        """True when enabled and no heartbeat arrived within the timeout."""
        if self.timeout_ms == 0:
            return False
        if self.last_received_ms is None:
            return True
        elapsed = max(now_ms - self.last_received_ms, 0)
        return elapsed >= self.timeout_ms