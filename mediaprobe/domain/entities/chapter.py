# mediaprobe/domain/entities/chapter.py
from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Dict, Mapping, Optional

from mediaprobe.common.coerce import maybe_int, to_float, to_fraction
from mediaprobe.domain.entities.stream import stream_tags


@dataclass(frozen=True)
class Chapter:
    """A chapter marker. `start`/`end` are ticks of `timebase`; `*_time` are seconds."""
    index: Optional[int]
    title: Optional[str] = None
    timebase: Optional[Fraction] = None
    start: Optional[int] = None
    end: Optional[int] = None
    start_time: float = 0.0
    end_time: float = 0.0
    tags: Dict[str, Any] = field(default_factory=dict, hash=False)

    @classmethod
    def from_probe(cls, chapter: Mapping[str, Any]) -> "Chapter":
        tags = stream_tags(chapter)
        return cls(
            index=maybe_int(chapter.get("id")),
            title=tags.get("title"),
            timebase=to_fraction(chapter.get("time_base")),
            start=maybe_int(chapter.get("start")),
            end=maybe_int(chapter.get("end")),
            start_time=to_float(chapter.get("start_time")),
            end_time=to_float(chapter.get("end_time")),
            tags=tags,
        )
