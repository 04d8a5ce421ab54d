# mediaprobe/common/probe/ffprobe_helpers.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
import json
import shlex
import subprocess

from mediaprobe.common.concurrency.pipe_drain import drain_process
from mediaprobe.common.logging import get_logger
from mediaprobe.domain.errors import FFprobeError, ProbeOutputError

logger = get_logger(__name__)

# Single-byte fallback: every byte sequence decodes, nothing is lost.
FALLBACK_ENCODING = "iso-8859-1"

PROBE_SECTIONS = ["-show_format", "-show_programs", "-show_streams", "-show_error"]


def build_ffprobe_cmd(ffprobe_bin: str, input_path: str | Path, *, show_chapters: bool = False) -> List[str]:
    """
    Build the ffprobe command line that emits the JSON document Movie is parsed from:
        <bin> -i <path> -print_format json -show_format -show_programs -show_streams -show_error
    """
    if isinstance(input_path, Path):
        input_path = str(input_path)
    cmd = [ffprobe_bin, "-i", input_path, "-print_format", "json", *PROBE_SECTIONS]
    if show_chapters:
        cmd.append("-show_chapters")
    return cmd


def decode_output(data: bytes) -> str:
    """Decode as UTF-8, re-reading as ISO-8859-1 when the bytes are not valid UTF-8."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("ffprobe output is not valid UTF-8; decoding as %s", FALLBACK_ENCODING)
        return data.decode(FALLBACK_ENCODING)


def run_ffprobe(cmd: List[str], timeout: Optional[float] = None) -> Tuple[str, str]:
    """
    Execute ffprobe and return its decoded (stdout, stderr).

    A non-zero exit code is not an error here: ffprobe reports damaged input
    through the JSON `error` record, which callers treat as a soft failure.
    """
    logger.debug("ffprobe cmd: %s", " ".join(shlex.quote(p) for p in cmd))
    try:
        proc = subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        raise FFprobeError("Failed to execute ffprobe (OS error).", stderr=str(e)) from e

    with proc:
        result = drain_process(proc, timeout=timeout)

    stdout = decode_output(result.stdout)
    stderr = decode_output(result.stderr)

    if result.timed_out:
        raise FFprobeError(f"ffprobe timed out after {timeout}s", stderr=stderr, rc=result.returncode)
    if result.returncode:
        logger.debug("ffprobe exited with rc=%s", result.returncode)
    return stdout, stderr


def load_probe_json(stdout: str) -> Dict[str, Any]:
    """Deserialize ffprobe's JSON document. Anything but a JSON object is fatal."""
    try:
        data = json.loads(stdout)
    except json.JSONDecodeError as e:
        logger.exception("Failed to parse ffprobe JSON")
        raise ProbeOutputError(stdout) from e
    if not isinstance(data, dict):
        raise ProbeOutputError(stdout)
    return data
