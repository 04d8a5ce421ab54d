# mediaprobe/domain/policies/metadata_parser.py
"""
Turn ffprobe's JSON document into typed format/program/stream/chapter views.

Safe to call in unit tests with fixture JSON: no I/O happens here. Output for
damaged files is frequently partial, so every scalar is coerced rather than
trusted; an `error` record short-circuits parsing entirely.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from mediaprobe.common.coerce import to_datetime, to_float, to_int
from mediaprobe.domain.dataclasses.probe import FormatInfo, ParsedMetadata
from mediaprobe.domain.entities.audio_stream import AudioStream
from mediaprobe.domain.entities.chapter import Chapter
from mediaprobe.domain.entities.program import Program
from mediaprobe.domain.entities.stream import stream_tags
from mediaprobe.domain.entities.video_stream import VideoStream
from mediaprobe.domain.enums import CodecType
from mediaprobe.domain.policies.stream_selection import select_default, streams_for_type


def has_probe_error(metadata: Mapping[str, Any]) -> bool:
    return "error" in (metadata or {})


def parse_format(fmt: Mapping[str, Any] | None) -> FormatInfo:
    fmt = fmt if isinstance(fmt, Mapping) else {}
    tags = stream_tags(fmt)
    return FormatInfo(
        container=fmt.get("format_name"),
        container_long_name=fmt.get("format_long_name"),
        size=to_int(fmt.get("size")),
        duration=to_float(fmt.get("duration")),
        start_time=to_float(fmt.get("start_time")),
        bitrate=to_int(fmt.get("bit_rate")),
        program_count=to_int(fmt.get("nb_programs")),
        stream_count=to_int(fmt.get("nb_streams")),
        creation_time=to_datetime(tags.get("creation_time")),
        tags=tags,
    )


def parse_programs(metadata: Mapping[str, Any]) -> Optional[Tuple[Program, ...]]:
    programs = metadata.get("programs")
    if programs is None:
        return None
    return tuple(Program.from_probe(p) for p in programs if isinstance(p, Mapping))


def parse_chapters(metadata: Mapping[str, Any]) -> Tuple[Chapter, ...]:
    return tuple(Chapter.from_probe(c) for c in (metadata.get("chapters") or []) if isinstance(c, Mapping))


def parse_probe_output(metadata: Dict[str, Any]) -> ParsedMetadata:
    """
    Extract format fields, programs, streams and chapters from ffprobe JSON.
    When the document carries an `error` record nothing is parsed and the
    duration is pinned to 0.
    """
    if has_probe_error(metadata):
        return ParsedMetadata(format=FormatInfo(duration=0.0), has_error=True)

    records = metadata.get("streams") or []
    video_streams = tuple(VideoStream.from_probe(s) for s in streams_for_type(records, CodecType.VIDEO))
    audio_streams = tuple(AudioStream.from_probe(s) for s in streams_for_type(records, CodecType.AUDIO))

    return ParsedMetadata(
        format=parse_format(metadata.get("format")),
        programs=parse_programs(metadata),
        video_streams=video_streams,
        audio_streams=audio_streams,
        video_stream=select_default(video_streams),
        audio_stream=select_default(audio_streams),
        chapters=parse_chapters(metadata),
        has_error=False,
    )
