# mediaprobe/domain/entities/stream.py
from __future__ import annotations

from typing import Any, Dict, Mapping

from mediaprobe.common.coerce import to_int


def is_default_disposition(stream: Mapping[str, Any]) -> bool:
    """ffprobe marks the default track with disposition.default == 1 ("1" in older builds)."""
    disposition = stream.get("disposition") or {}
    return to_int(disposition.get("default")) == 1


def stream_tags(record: Mapping[str, Any]) -> Dict[str, Any]:
    tags = record.get("tags") or {}
    return dict(tags) if isinstance(tags, Mapping) else {}


def fmt(value: Any) -> str:
    # ffprobe omits fields freely; render them as blanks in overviews
    return "" if value is None else str(value)
