# mediaprobe/services/api/routers/probe.py
from __future__ import annotations
from fastapi import APIRouter, Depends, Query

from mediaprobe.common.settings import get_settings
from mediaprobe.domain.ports.probe import MediaProbePort
from mediaprobe.services.api.deps import get_media_probe
from mediaprobe.services.mappers.movie import to_movie_read
from mediaprobe.services.schemas.probe import MovieRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/probe", tags=["probe"])


@router.get("", response_model=MovieRead)
def probe_resource(
    path: str = Query(..., min_length=1, description="Local file path or http(s) URL"),
    no_verify: bool = Query(False, description="Skip the HTTP HEAD check for URLs"),
    probe: MediaProbePort = Depends(get_media_probe),
) -> MovieRead:
    # domain errors become 404/502/503 in services.api.errors
    movie = probe.probe(path, no_verify=no_verify)
    return to_movie_read(movie)
