"""
Ties the overlay process to ours, so it also goes away when we get killed
instead of shutting down cleanly.

Windows: the child is assigned to a job object that kills its processes when
the last handle to it closes. The handle is kept open for the lifetime of
this process and closed by the OS on exit.

Linux: the child asks the kernel for SIGTERM once the thread that forked it
exits (PR_SET_PDEATHSIG), set up between fork and exec. The supervisor
forks from a worker thread that lives as long as this process.
"""
import ctypes
import ctypes.util
import logging
import os
import signal
import subprocess
import sys
from typing import Any, Callable, Optional

PR_SET_PDEATHSIG = 1


def _load_libc() -> Optional[Any]:
    name = ctypes.util.find_library("c")
    if not name:
        return None

    try:
        return ctypes.CDLL(name, use_errno=True)
    except OSError:
        return None


def parent_death_signal() -> Optional[Callable[[], None]]:
    """
    preexec_fn for Popen on Linux, None elsewhere or when libc cannot be
    loaded. Runs in the child, so it must not raise or log.
    """
    if not sys.platform.startswith("linux"):
        return None

    libc = _load_libc()
    if libc is None:
        logging.warning("libc not found, overlay will not follow parent termination")
        return None

    def set_pdeathsig() -> None:
        libc.prctl(PR_SET_PDEATHSIG, signal.SIGTERM, 0, 0, 0)

    return set_pdeathsig


def assign_to_job_object(process: subprocess.Popen) -> Optional[Any]:
    """
    Windows only. Returns the job handle, which the caller has to keep
    referenced for as long as the child should live.
    """
    if os.name != "nt":
        return None

    import win32api
    import win32con
    import win32job

    job = win32job.CreateJobObject(None, "")
    info = win32job.QueryInformationJobObject(job, win32job.JobObjectExtendedLimitInformation)
    info["BasicLimitInformation"]["LimitFlags"] |= win32job.JOB_OBJECT_LIMIT_KILL_ON_JOB_CLOSE
    win32job.SetInformationJobObject(job, win32job.JobObjectExtendedLimitInformation, info)

    handle = win32api.OpenProcess(
        win32con.PROCESS_SET_QUOTA | win32con.PROCESS_TERMINATE,
        False,
        process.pid
    )
    try:
        win32job.AssignProcessToJobObject(job, handle)
    finally:
        win32api.CloseHandle(handle)

    logging.info("VR overlay process assigned to job object")
    return job
