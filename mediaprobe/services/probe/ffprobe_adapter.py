# mediaprobe/services/probe/ffprobe_adapter.py
from __future__ import annotations

import shutil
from pathlib import Path
from typing import Optional

from mediaprobe.common.logging import get_logger
from mediaprobe.common.path.remote import is_remote
from mediaprobe.common.probe.ffprobe_helpers import build_ffprobe_cmd, load_probe_json, run_ffprobe
from mediaprobe.common.settings import Settings, get_settings
from mediaprobe.domain.entities.movie import Movie
from mediaprobe.domain.errors import FFprobeError, ResourceNotFoundError
from mediaprobe.domain.ports.probe import MediaProbePort
from mediaprobe.services.remote.http_resolver import HttpResolver

logger = get_logger(__name__)


class FFprobeAdapter(MediaProbePort):
    """
    Infrastructure adapter implementing MediaProbePort using `ffprobe`.

    probe() runs the whole pipeline: verify the resource (filesystem check or
    HTTP HEAD with redirects), run ffprobe, parse its JSON and stderr, and
    return an immutable Movie. Safe to share between threads; each call owns
    its subprocess and HTTP client.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        ffprobe_bin: Optional[str] = None,
        timeout_sec: Optional[float] = None,
        resolver: Optional[HttpResolver] = None,
    ):
        cfg = settings or get_settings()
        # choose binary
        candidate = ffprobe_bin or cfg.ffprobe.bin
        if not candidate or candidate == "ffprobe":
            # try to resolve absolute path for nicer errors
            resolved = shutil.which(candidate or "ffprobe")
            if not resolved:
                raise FFprobeError("ffprobe not found on PATH; set FFPROBE__BIN or install ffmpeg.")
            candidate = resolved

        self.ffprobe_bin = candidate
        self.timeout_sec = timeout_sec if timeout_sec is not None else cfg.ffprobe.timeout_sec
        self.show_chapters = cfg.ffprobe.show_chapters
        self.resolver = resolver or HttpResolver(
            max_redirects=cfg.http.max_redirect_attempts,
            timeout_sec=cfg.http.timeout_sec,
        )

    # ---- Port API -------------------------------------------------------------
    def probe(self, path: Path | str, *, no_verify: bool = False) -> Movie:
        if not path:
            raise FFprobeError("No path provided to probe().")

        target = self._verify(str(path), no_verify=no_verify)
        cmd = build_ffprobe_cmd(self.ffprobe_bin, target, show_chapters=self.show_chapters)
        stdout, stderr = run_ffprobe(cmd, timeout=self.timeout_sec)
        metadata = load_probe_json(stdout)
        return Movie.from_probe_output(target, metadata, stderr)

    # ---- helpers --------------------------------------------------------------
    def _verify(self, path: str, *, no_verify: bool) -> str:
        """Return the path to probe; remote paths may change if the server redirects."""
        if is_remote(path):
            if no_verify:
                return path
            resolved = self.resolver.resolve(path)
            if resolved != path:
                logger.info("probing %s (redirected from %s)", resolved, path)
            return resolved

        if not Path(path).exists():
            raise ResourceNotFoundError(path)
        return path


def probe_movie(path: Path | str, *, no_verify: bool = False, settings: Optional[Settings] = None) -> Movie:
    """One-shot convenience: FFprobeAdapter(settings).probe(path)."""
    return FFprobeAdapter(settings).probe(path, no_verify=no_verify)
