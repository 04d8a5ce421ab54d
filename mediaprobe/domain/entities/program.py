# mediaprobe/domain/entities/program.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from mediaprobe.common.coerce import maybe_int
from mediaprobe.domain.entities.audio_stream import AudioStream
from mediaprobe.domain.entities.stream import stream_tags
from mediaprobe.domain.entities.video_stream import VideoStream
from mediaprobe.domain.enums import CodecType
from mediaprobe.domain.policies.stream_selection import select_default, streams_for_type


@dataclass(frozen=True)
class Program:
    """
    One program of a multi-program container (e.g. an MPEG-TS broadcast).
    Streams and default selection are scoped to the program's own stream list.
    """
    id: Optional[int]
    tags: Dict[str, Any] = field(default_factory=dict, hash=False)
    video_streams: Tuple[VideoStream, ...] = ()
    audio_streams: Tuple[AudioStream, ...] = ()

    @classmethod
    def from_probe(cls, program: Mapping[str, Any]) -> "Program":
        records = program.get("streams") or []
        return cls(
            id=maybe_int(program.get("program_id")),
            tags=stream_tags(program),
            video_streams=tuple(VideoStream.from_probe(s) for s in streams_for_type(records, CodecType.VIDEO)),
            audio_streams=tuple(AudioStream.from_probe(s) for s in streams_for_type(records, CodecType.AUDIO)),
        )

    @property
    def video_stream(self) -> Optional[VideoStream]:
        return select_default(self.video_streams)

    @property
    def audio_stream(self) -> Optional[AudioStream]:
        return select_default(self.audio_streams)
