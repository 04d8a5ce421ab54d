# mediaprobe/services/api/deps.py
from __future__ import annotations

from mediaprobe.domain.ports.probe import MediaProbePort
from mediaprobe.services.probe.ffprobe_adapter import FFprobeAdapter


def get_media_probe() -> MediaProbePort:
    """
    Provide a MediaProbePort implementation (ffprobe) via DI.
    Tests override this dependency with a fake.
    """
    return FFprobeAdapter()
