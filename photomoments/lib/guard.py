"""
Exclusive run guard for background workers.

A RunGuard allows one run at a time per instance and carries a cooperative
cancellation flag. Workers receive their guard explicitly; `main_worker` is
the process-wide instance shared by the scheduled jobs.
"""
import threading


class WorkerBusyError(RuntimeError):
    """Raised when a worker is started while another run holds the guard."""


class RunGuard:
    """Mutual exclusion flag with cancellation support."""

    def __init__(self, name: str = 'worker'):
        self.name = name
        self._lock = threading.Lock()
        self._running = False
        self._canceled = False

    def start(self):
        """
        Acquire the guard.

        Raises:
            WorkerBusyError: If a run is already active
        """
        with self._lock:
            if self._running:
                raise WorkerBusyError(f"{self.name} already running")
            self._running = True
            self._canceled = False

    def stop(self):
        """Release the guard. Safe to call when not running."""
        with self._lock:
            self._running = False

    def cancel(self):
        """Ask the current run to stop at its next checkpoint."""
        with self._lock:
            self._canceled = True

    @property
    def running(self) -> bool:
        with self._lock:
            return self._running

    @property
    def canceled(self) -> bool:
        with self._lock:
            return self._canceled

    def __repr__(self):
        return f"<RunGuard {self.name}: running={self.running} canceled={self.canceled}>"


main_worker = RunGuard('main worker')
