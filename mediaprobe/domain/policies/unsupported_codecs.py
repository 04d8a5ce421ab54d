# mediaprobe/domain/policies/unsupported_codecs.py
from __future__ import annotations

import re
from typing import FrozenSet

# ffprobe reports codecs it cannot decode only on stderr, never in the JSON.
UNSUPPORTED_CODEC_PATTERN = re.compile(r"^Unsupported codec with id (\d+) for input stream (\d+)$")


def unsupported_streams(stderr: str) -> FrozenSet[int]:
    """Indices of input streams ffprobe flagged as using an unsupported codec."""
    indices = set()
    for line in (stderr or "").splitlines():
        match = UNSUPPORTED_CODEC_PATTERN.match(line)
        if match:
            indices.add(int(match.group(2)))
    return frozenset(indices)
