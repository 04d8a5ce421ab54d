from __future__ import annotations

import logging
import subprocess
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import IO, Optional

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DrainResult:
    stdout: bytes
    stderr: bytes
    returncode: Optional[int]
    timed_out: bool = False


def _read_all(stream: Optional[IO[bytes]]) -> bytes:
    if stream is None:
        return b""
    try:
        return stream.read()
    finally:
        stream.close()


def drain_process(proc: subprocess.Popen, timeout: Optional[float] = None) -> DrainResult:
    """
    Read a child's stdout and stderr to EOF on two worker threads started together,
    then wait for the child.

    Reading one pipe after the other can deadlock: if the child fills the pipe
    nobody is reading, it blocks forever. Both readers are joined before any output
    is returned, so callers never see partial output.

    Notes
    -----
    - If `timeout` elapses the child is killed; the readers still run to EOF
      (killing closes the child's ends) and `timed_out` is set.
    """
    timed_out = False
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="pipe-drain") as pool:
        out_f = pool.submit(_read_all, proc.stdout)
        err_f = pool.submit(_read_all, proc.stderr)
        try:
            proc.wait(timeout=timeout)
        except subprocess.TimeoutExpired:
            log.warning("pid %s still running after %ss; killing it", proc.pid, timeout)
            proc.kill()
            proc.wait()
            timed_out = True
        stdout = out_f.result()
        stderr = err_f.result()

    return DrainResult(stdout=stdout, stderr=stderr, returncode=proc.returncode, timed_out=timed_out)
