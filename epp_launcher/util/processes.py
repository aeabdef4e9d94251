"""
Foreground execution of the timed pipeline.

The outer process gets its own process group so that the whole tree
(time, sh, both stages) can be signalled at once. While it runs, SIGINT,
SIGTERM and SIGHUP delivered to the launcher stop that group before the
launcher returns.
"""

import os
import signal
import subprocess
import threading

STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM, signal.SIGHUP)


class _Stopped(Exception):
    def __init__(self, signum: int):
        super().__init__(signum)
        self.signum = signum


def exit_status(rc: int) -> int:
    # Popen reports death-by-signal as -N; shells report 128+N
    return 128 - rc if rc < 0 else rc


class ForegroundJob:
    def __init__(self, cmd: list[str], *, cwd: str | None = None):
        self.cmd = cmd
        self.cwd = cwd
        self.proc: subprocess.Popen | None = None
        self._stop_signum: int | None = None

    def signal_group(self, sig: int) -> None:
        p = self.proc
        if p is None or p.poll() is not None:
            return
        try:
            os.killpg(p.pid, sig)
        except ProcessLookupError:
            pass

    def stop(self, *, term_timeout_sec: float = 5.0, kill_timeout_sec: float = 1.0) -> None:
        p = self.proc
        if p is None:
            return
        for sig, timeout in ((signal.SIGTERM, term_timeout_sec), (signal.SIGKILL, kill_timeout_sec)):
            self.signal_group(sig)
            try:
                p.wait(timeout=timeout)
                return
            except subprocess.TimeoutExpired:
                continue

    def run(self) -> int:
        previous = self._install_handlers()
        try:
            self.proc = subprocess.Popen(self.cmd, cwd=self.cwd, start_new_session=True)
            return exit_status(self.proc.wait())
        except (_Stopped, KeyboardInterrupt) as exc:
            signum = exc.signum if isinstance(exc, _Stopped) else signal.SIGINT
            self.stop()
            return 128 + int(signum)
        finally:
            self._restore_handlers(previous)

    def _on_signal(self, signum, frame) -> None:
        # only the first signal interrupts the wait; stop() runs after it
        if self._stop_signum is not None:
            return
        self._stop_signum = signum
        raise _Stopped(signum)

    def _install_handlers(self) -> dict[int, object]:
        if threading.current_thread() is not threading.main_thread():
            return {}
        previous = {}
        for sig in STOP_SIGNALS:
            previous[sig] = signal.signal(sig, self._on_signal)
        return previous

    @staticmethod
    def _restore_handlers(previous: dict[int, object]) -> None:
        for sig, handler in previous.items():
            if handler is not None:
                signal.signal(sig, handler)


def run_foreground(cmd: list[str], *, cwd: str | None = None) -> int:
    return ForegroundJob(cmd, cwd=cwd).run()
