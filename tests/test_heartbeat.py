import pytest

from vehicle_sentinel.heartbeat import HeartbeatMonitor


def test_timeout_fires_after_threshold():
    hb = HeartbeatMonitor(500)
    hb.on_heartbeat(1000)
    assert hb.is_timed_out(1400) is False
    assert hb.is_timed_out(1500) is True
    assert hb.is_timed_out(2000) is True


def test_no_false_positives():
    hb = HeartbeatMonitor(500)
    hb.on_heartbeat(1000)
    assert not any(hb.is_timed_out(t) for t in range(1000, 1500, 10))


def test_recovery_after_new_heartbeat():
    hb = HeartbeatMonitor(500)
    hb.on_heartbeat(1000)
    assert hb.is_timed_out(1500) is True
    hb.on_heartbeat(1600)
    assert hb.is_timed_out(1600) is False
    assert hb.is_timed_out(2000) is False
    assert hb.is_timed_out(2100) is True


def test_disabled_when_timeout_zero():
    hb = HeartbeatMonitor(0)
    assert hb.is_timed_out(0) is False
    assert hb.is_timed_out(999_999) is False


def test_no_heartbeat_means_timed_out():
    hb = HeartbeatMonitor(500)
    assert hb.is_timed_out(0) is True
    assert hb.is_timed_out(1000) is True


def test_clock_going_backwards_is_not_timeout():
    hb = HeartbeatMonitor(500)
    hb.on_heartbeat(1000)
    assert hb.is_timed_out(100) is False


def test_negative_timeout_rejected():
    with pytest.raises(ValueError):
        HeartbeatMonitor(-1)