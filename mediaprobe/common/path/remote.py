# mediaprobe/common/path/remote.py
from __future__ import annotations

import re
from pathlib import Path

_REMOTE_RE = re.compile(r"^https?://[^\s/?#]+", re.IGNORECASE)


def is_remote(path: Path | str) -> bool:
    """True for http(s) URLs; everything else is treated as a local path."""
    if isinstance(path, Path):
        return False
    return bool(_REMOTE_RE.match(path))


def is_local(path: Path | str) -> bool:
    return not is_remote(path)
