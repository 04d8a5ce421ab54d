from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from mediaprobe.domain.entities.audio_stream import AudioStream
from mediaprobe.domain.entities.chapter import Chapter
from mediaprobe.domain.entities.program import Program
from mediaprobe.domain.entities.video_stream import VideoStream


@dataclass(frozen=True)
class FormatInfo:
    # container-level fields from the `format` section
    container: Optional[str] = None
    container_long_name: Optional[str] = None
    size: int = 0
    duration: float = 0.0
    start_time: float = 0.0
    bitrate: int = 0
    program_count: int = 0
    stream_count: int = 0
    creation_time: Optional[datetime] = None
    tags: Dict[str, Any] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class ParsedMetadata:
    format: FormatInfo = field(default_factory=FormatInfo)
    # None when ffprobe reported no `programs` section at all
    programs: Optional[Tuple[Program, ...]] = None
    video_streams: Tuple[VideoStream, ...] = ()
    audio_streams: Tuple[AudioStream, ...] = ()
    video_stream: Optional[VideoStream] = None
    audio_stream: Optional[AudioStream] = None
    chapters: Tuple[Chapter, ...] = ()
    # ffprobe emitted a top-level `error` record
    has_error: bool = False
