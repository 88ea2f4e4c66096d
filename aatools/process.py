"""Running external programs in their own process group."""

from __future__ import annotations

import io
import os
import signal as _signal
import subprocess
import threading
from typing import Any, Iterable, Optional

from aatools.paths import Path


def _parse_env(entries: Iterable[str]) -> dict[str, str]:
    env: dict[str, str] = {}
    for entry in entries:
        key, sep, value = entry.partition("=")
        if sep:
            env[key] = value
    return env


def _target(out: Any) -> tuple[Any, Any]:
    """Return the argument to give Popen and, if needed, a sink to pump into."""
    if out is None or isinstance(out, int):
        return out, None
    try:
        out.fileno()
    except (AttributeError, OSError, ValueError):
        return subprocess.PIPE, out
    return out, None


def _pump(stream: Any, sink: Any) -> None:
    text = isinstance(sink, io.TextIOBase)
    with stream:
        for chunk in iter(lambda: stream.read(8192), b""):
            sink.write(chunk.decode("utf-8", "replace") if text else chunk)


class Process:
    """An external command, started in a new process group.

    Standard input defaults to the null device so that tools that look at
    their terminal bindings do not think they run interactively.
    """

    def __init__(self, args: Iterable[Any], extra_env: Iterable[str] = ()) -> None:
        self._args = [str(arg) for arg in args]
        if not self._args:
            raise ValueError("no executable specified")
        self._env = {**os.environ, **_parse_env(extra_env)}
        self.directory: Optional[str] = None
        self._stdin: Any = subprocess.DEVNULL
        self._stdout: Any = None
        self._stderr: Any = None
        self._popen: Optional[subprocess.Popen] = None
        self._pumps: list[threading.Thread] = []

    @property
    def args(self) -> list[str]:
        """The command line."""
        return list(self._args)

    @property
    def pid(self) -> Optional[int]:
        """Process id once started."""
        return self._popen.pid if self._popen else None

    @property
    def stdin(self):
        """Writable pipe to the process, when requested with use_stdin_pipe."""
        return self._popen.stdin if self._popen else None

    @property
    def stdout(self):
        """Readable pipe from the process, when requested with use_stdout_pipe."""
        return self._popen.stdout if self._popen and not self._pumps_for(1) else None

    @property
    def stderr(self):
        """Readable pipe from the process, when requested with use_stderr_pipe."""
        return self._popen.stderr if self._popen and not self._pumps_for(2) else None

    def _pumps_for(self, fd: int) -> bool:
        sink = self._stdout if fd == 1 else self._stderr
        return _target(sink)[1] is not None

    def set_dir_from_path(self, path: Optional[Path]) -> None:
        """Set the working directory from a Path; None means the current one."""
        self.directory = None if path is None else str(path)

    def _ensure_not_started(self) -> None:
        if self._popen is not None:
            raise RuntimeError("process already started")

    def redirect_stdout_to(self, out: Any) -> None:
        """Send standard output to a file or any object with a write method."""
        self._ensure_not_started()
        self._stdout = out

    def redirect_stderr_to(self, out: Any) -> None:
        """Send standard error to a file or any object with a write method."""
        self._ensure_not_started()
        self._stderr = out

    def use_stdin_pipe(self) -> None:
        """Connect standard input to a pipe, available as ``stdin`` once started."""
        self._ensure_not_started()
        self._stdin = subprocess.PIPE

    def use_stdout_pipe(self) -> None:
        """Connect standard output to a pipe, available as ``stdout`` once started."""
        self._ensure_not_started()
        self._stdout = subprocess.PIPE

    def use_stderr_pipe(self) -> None:
        """Connect standard error to a pipe, available as ``stderr`` once started."""
        self._ensure_not_started()
        self._stderr = subprocess.PIPE

    def set_environment(self, values: Iterable[str]) -> None:
        """Replace the whole environment with ``KEY=value`` entries."""
        self._env = _parse_env(values)

    def start(self) -> None:
        """Start the process without waiting for it."""
        self._ensure_not_started()
        stdout_arg, stdout_sink = _target(self._stdout)
        stderr_arg, stderr_sink = _target(self._stderr)
        self._popen = subprocess.Popen(
            self._args,
            stdin=self._stdin,
            stdout=stdout_arg,
            stderr=stderr_arg,
            env=self._env,
            cwd=self.directory or None,
            start_new_session=True,
        )
        for stream, sink in (
            (self._popen.stdout, stdout_sink),
            (self._popen.stderr, stderr_sink),
        ):
            if sink is not None:
                thread = threading.Thread(target=_pump, args=(stream, sink), daemon=True)
                thread.start()
                self._pumps.append(thread)

    def _require_started(self) -> subprocess.Popen:
        if self._popen is None:
            raise RuntimeError("process not started")
        return self._popen

    def wait(self) -> None:
        """Wait for the process to exit; raise CalledProcessError on failure."""
        popen = self._require_started()
        returncode = popen.wait()
        for thread in self._pumps:
            thread.join()
        if popen.stdin is not None and not popen.stdin.closed:
            popen.stdin.close()
        if returncode != 0:
            raise subprocess.CalledProcessError(returncode, self._args)

    def signal(self, sig: int) -> None:
        """Send a signal to the process."""
        self._require_started().send_signal(sig)

    def kill(self) -> None:
        """Kill the whole process group at once, without waiting."""
        popen = self._require_started()
        os.killpg(os.getpgid(popen.pid), _signal.SIGKILL)

    def run(self) -> None:
        """Start the process and wait for it to complete."""
        self.start()
        self.wait()

    def run_within_context(self, cancel: Optional[threading.Event]) -> None:
        """Run the process, killing it if ``cancel`` is set before it ends."""
        self.start()
        if cancel is None:
            self.wait()
            return
        completed = threading.Event()

        def watch() -> None:
            while not completed.is_set():
                if cancel.wait(0.05):
                    if not completed.is_set():
                        try:
                            self.kill()
                        except ProcessLookupError:
                            pass
                    return

        watcher = threading.Thread(target=watch, daemon=True)
        watcher.start()
        try:
            self.wait()
        finally:
            completed.set()
            watcher.join()

    def run_and_capture_output(
        self, cancel: Optional[threading.Event]
    ) -> tuple[bytes, bytes]:
        """Run the process and return its standard output and standard error.

        On failure the CalledProcessError carries both outputs.
        """
        stdout, stderr = io.BytesIO(), io.BytesIO()
        self.redirect_stdout_to(stdout)
        self.redirect_stderr_to(stderr)
        try:
            self.run_within_context(cancel)
        except subprocess.CalledProcessError as err:
            err.output = stdout.getvalue()
            err.stderr = stderr.getvalue()
            raise
        return stdout.getvalue(), stderr.getvalue()


def new_process(extra_env: Iterable[str], *args: Any) -> Process:
    """Create a process; the first argument is the executable."""
    return Process(args, extra_env)


def new_process_from_path(
    extra_env: Iterable[str], executable: Path, *args: Any
) -> Process:
    """Create a process from an executable path and its arguments."""
    return Process([str(executable), *args], extra_env)