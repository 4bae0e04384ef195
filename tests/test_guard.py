"""Tests for the exclusive run guard."""
import pytest

from photomoments.lib.guard import RunGuard, WorkerBusyError


class TestRunGuard:
    """Tests for RunGuard start/stop/cancel."""

    def test_start_and_stop(self):
        guard = RunGuard('test')
        guard.start()
        assert guard.running is True
        guard.stop()
        assert guard.running is False

    def test_second_start_fails(self):
        guard = RunGuard('test')
        guard.start()
        with pytest.raises(WorkerBusyError):
            guard.start()
        assert guard.running is True

    def test_restart_after_stop(self):
        guard = RunGuard('test')
        guard.start()
        guard.stop()
        guard.start()
        assert guard.running is True

    def test_cancel_sets_flag(self):
        guard = RunGuard('test')
        guard.start()
        guard.cancel()
        assert guard.canceled is True

    def test_start_clears_stale_cancel(self):
        guard = RunGuard('test')
        guard.cancel()
        guard.start()
        assert guard.canceled is False

    def test_stop_when_idle(self):
        guard = RunGuard('test')
        guard.stop()
        assert guard.running is False

    def test_independent_instances(self):
        a = RunGuard('a')
        b = RunGuard('b')
        a.start()
        b.start()
        assert a.running and b.running
