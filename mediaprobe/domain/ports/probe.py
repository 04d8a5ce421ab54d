from __future__ import annotations
from pathlib import Path
from typing import Protocol
from mediaprobe.domain.entities.movie import Movie

class MediaProbePort(Protocol):
    def probe(self, path: Path | str, *, no_verify: bool = False) -> Movie: ...
