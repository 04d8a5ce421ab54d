# mediaprobe/services/api/routers/health.py
from __future__ import annotations

import shutil
from typing import Any, Dict, Optional

from fastapi import APIRouter

from mediaprobe.common.settings import get_settings

router = APIRouter()


def _ffprobe_path(bin_setting: str) -> Optional[str]:
    # which() checks an explicit path directly and searches PATH for a bare name
    return shutil.which(bin_setting) if bin_setting else None


@router.get("/healthz")
def healthz() -> Dict[str, Any]:
    """Liveness plus whether the configured ffprobe binary can be found."""
    s = get_settings()
    ffprobe = _ffprobe_path(s.ffprobe.bin)
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
        "ffprobe": {"bin": s.ffprobe.bin, "path": ffprobe, "available": ffprobe is not None},
        "max_redirect_attempts": s.http.max_redirect_attempts,
    }
