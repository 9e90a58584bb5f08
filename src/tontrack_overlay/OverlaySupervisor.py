"""
Runs the VR overlay as a child process and feeds it commands.

Stopped -> Running on start(), back to Stopped on stop() or once poll()
notices the process exited on its own. The process handle and its stdin
are kept together in one record, so there is never one without the other.

Children are always spawned from one long-lived worker thread. On Linux the
parent death signal follows the forking thread, not the process.
"""
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
import logging
import os
from pathlib import Path
import subprocess
import sys
import threading
from typing import IO, Any, Dict, List, Optional

from tontrack_helper import OverlayPosition, application_path
from tontrack_helper.exceptions import (
    SidecarIoError,
    SidecarNotFound,
    SidecarSpawnFailed,
)

from tontrack_overlay.OutputCapture import OutputCapture
from tontrack_overlay.OverlayCommand import OverlayCommand, Quit, encode
from tontrack_overlay.lifetime import assign_to_job_object, parent_death_signal

BINARY_NAME = "vr-overlay.exe" if os.name == "nt" else "vr-overlay"


@dataclass
class _Running:
    process: subprocess.Popen
    stdin: IO[bytes]
    job: Optional[Any] = None


class OverlaySupervisor:
    GRACE_PERIOD = 0.1

    def __init__(
        self,
        output: OutputCapture,
        executable: Optional[str] = None,
        resource_dir: Optional[str] = None,
        grace_period: float = GRACE_PERIOD
    ) -> None:
        self.output = output
        self.executable = executable
        self.resource_dir = Path(resource_dir) if resource_dir else None
        self.grace_period = grace_period

        self._running: Optional[_Running] = None
        self._lock = threading.Lock()
        self._spawner = ThreadPoolExecutor(max_workers=1, thread_name_prefix="OverlaySpawner")

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._running is not None

    def candidates(self) -> List[Path]:
        """Locations the overlay binary is looked up in, in order."""
        paths: List[Path] = []

        if self.executable:
            paths.append(Path(self.executable))

        # Shipped next to the application
        paths.append(Path(sys.executable).resolve().parent / BINARY_NAME)
        paths.append(application_path() / BINARY_NAME)

        resource_dir = self.resource_dir or application_path() / "resources"
        paths.append(resource_dir / BINARY_NAME)
        paths.append(resource_dir / "binaries" / BINARY_NAME)
        if os.name == "nt":
            paths.append(resource_dir / "binaries" / "vr-overlay-x86_64-pc-windows-msvc.exe")

        return paths

    def find_executable(self) -> Path:
        candidates = self.candidates()
        for candidate in candidates:
            if candidate.is_file():
                logging.info(f"Found VR overlay at: {candidate}")
                return candidate

            logging.debug(f"VR overlay not found at: {candidate}")

        raise SidecarNotFound(candidates)

    def start(self, position: OverlayPosition) -> None:
        with self._lock:
            if self._running is not None:
                return

            binary = self.find_executable()
            logging.info(f"Starting VR overlay: {binary} --position {position.argument}")

            kwargs: Dict[str, Any] = {
                # The overlay loads its libraries from its own directory
                "cwd": str(binary.parent),
                "stdin": subprocess.PIPE,
                "stdout": subprocess.PIPE,
                "stderr": subprocess.PIPE,
            }
            if os.name == "nt":
                kwargs["creationflags"] = getattr(subprocess, "CREATE_NO_WINDOW", 0)
            else:
                preexec = parent_death_signal()
                if preexec is not None:
                    kwargs["preexec_fn"] = preexec

            try:
                process = self._spawner.submit(
                    subprocess.Popen,
                    [str(binary), "--position", position.argument],
                    **kwargs
                ).result()
            except (OSError, subprocess.SubprocessError) as e:
                raise SidecarSpawnFailed(f"Failed to start VR overlay: {e}") from e

            job = None
            try:
                job = assign_to_job_object(process)
            except Exception as e:
                logging.warning(f"Failed to assign VR overlay to job object: {e}")

            if process.stdout is not None:
                self.output.attach(process.stdout, "stdout")
            if process.stderr is not None:
                self.output.attach(process.stderr, "stderr")

            self._running = _Running(process=process, stdin=process.stdin, job=job)
            logging.info(f"VR overlay started (pid={process.pid})")

    def stop(self) -> None:
        with self._lock:
            running = self._running
            if running is None:
                return

            try:
                self._write(running, Quit())
            except SidecarIoError as e:
                logging.debug(f"Quit not delivered: {e}")

            try:
                try:
                    running.process.wait(timeout=self.grace_period)
                except subprocess.TimeoutExpired:
                    logging.info("VR overlay did not quit in time, killing it")
                    running.process.kill()
                    running.process.wait()
            except OSError as e:
                logging.warning(f"Failed to terminate VR overlay: {e}")
            finally:
                self._close_stdin(running)
                self._running = None

            logging.info("VR overlay stopped")

    def send(self, command: OverlayCommand) -> None:
        with self._lock:
            if self._running is None:
                return

            self._write(self._running, command)

    def poll(self) -> Optional[int]:
        """
        Check whether the overlay is still alive. Returns the exit code when
        it exited on its own, the supervisor is Stopped afterwards.
        """
        with self._lock:
            running = self._running
            if running is None:
                return None

            code = running.process.poll()
            if code is None:
                return None

            logging.warning(f"VR overlay exited unexpectedly (code {code})")
            self._close_stdin(running)
            self._running = None
            return code

    def _write(self, running: _Running, command: OverlayCommand) -> None:
        line = encode(command) + "\n"
        try:
            running.stdin.write(line.encode("utf-8"))
            running.stdin.flush()
        except (OSError, ValueError) as e:
            raise SidecarIoError(f"Failed to write VR command: {e}") from e

        logging.debug(f"Sent VR command {command!r} ({len(line)} bytes)")

    def _close_stdin(self, running: _Running) -> None:
        try:
            running.stdin.close()
        except (OSError, ValueError):
            pass
