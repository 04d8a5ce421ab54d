# mediaprobe/domain/policies/stream_selection.py
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Protocol, Sequence, TypeVar

from mediaprobe.domain.enums import CodecType


class _HasDefault(Protocol):
    default: bool


S = TypeVar("S", bound=_HasDefault)


def select_default(streams: Sequence[S]) -> Optional[S]:
    """
    The stream flagged default, else the first one, else None.
    Used identically for a whole Movie and for each Program.
    """
    for s in streams:
        if s.default:
            return s
    return streams[0] if streams else None


def streams_for_type(records: Iterable[Mapping[str, Any]] | None, codec_type: CodecType) -> List[Mapping[str, Any]]:
    """Stream records of one codec_type, in probe order."""
    return [
        r for r in (records or [])
        if isinstance(r, Mapping) and r.get("codec_type") == codec_type
    ]
