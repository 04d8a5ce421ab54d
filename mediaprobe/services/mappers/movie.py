# mediaprobe/services/mappers/movie.py
from __future__ import annotations

from fractions import Fraction
from typing import Optional

from mediaprobe.domain.entities.audio_stream import AudioStream
from mediaprobe.domain.entities.chapter import Chapter
from mediaprobe.domain.entities.movie import Movie
from mediaprobe.domain.entities.program import Program
from mediaprobe.domain.entities.video_stream import VideoStream
from mediaprobe.services.schemas.probe import (
    AudioStreamRead, ChapterRead, MovieRead, ProgramRead, VideoStreamRead,
)


def _fraction_str(x: Optional[Fraction]) -> Optional[str]:
    if x is None:
        return None
    return f"{x.numerator}/{x.denominator}"


def _index(stream: VideoStream | AudioStream | None) -> Optional[int]:
    return stream.index if stream is not None else None


def to_video_stream_read(s: VideoStream) -> VideoStreamRead:
    return VideoStreamRead(
        index=s.index,
        default=s.default,
        codec_name=s.codec_name,
        codec_long_name=s.codec_long_name,
        bitrate=s.bitrate,
        width=s.width,
        height=s.height,
        resolution=s.resolution,
        pixel_format=s.pixel_format,
        color_space=s.color_space,
        sar=s.sar,
        dar=s.dar,
        frame_rate=_fraction_str(s.frame_rate),
        rotation=s.rotation,
        calculated_aspect_ratio=s.calculated_aspect_ratio,
        calculated_pixel_aspect_ratio=s.calculated_pixel_aspect_ratio,
        profile=s.profile,
        level=s.level,
        tags=dict(s.tags),
        overview=s.overview,
    )


def to_audio_stream_read(s: AudioStream) -> AudioStreamRead:
    return AudioStreamRead(
        index=s.index,
        default=s.default,
        codec_name=s.codec_name,
        codec_long_name=s.codec_long_name,
        bitrate=s.bitrate,
        channels=s.channels,
        sample_rate=s.sample_rate,
        channel_layout=s.channel_layout,
        tags=dict(s.tags),
        overview=s.overview,
    )


def to_program_read(p: Program) -> ProgramRead:
    return ProgramRead(
        id=p.id,
        tags=dict(p.tags),
        video_streams=[to_video_stream_read(s) for s in p.video_streams],
        audio_streams=[to_audio_stream_read(s) for s in p.audio_streams],
        video_stream_index=_index(p.video_stream),
        audio_stream_index=_index(p.audio_stream),
    )


def to_chapter_read(c: Chapter) -> ChapterRead:
    return ChapterRead(
        index=c.index,
        title=c.title,
        timebase=_fraction_str(c.timebase),
        start=c.start,
        end=c.end,
        start_time=c.start_time,
        end_time=c.end_time,
    )


def to_movie_read(m: Movie) -> MovieRead:
    return MovieRead(
        path=m.path,
        valid=m.valid,
        duration=m.duration,
        start_time=m.start_time,
        bitrate=m.bitrate,
        size=m.size,
        container=m.container,
        container_long_name=m.container_long_name,
        creation_time=m.creation_time,
        format_tags=dict(m.format_tags),
        program_count=m.program_count,
        stream_count=m.stream_count,
        programs=[to_program_read(p) for p in m.programs] if m.programs is not None else None,
        video_streams=[to_video_stream_read(s) for s in m.video_streams],
        audio_streams=[to_audio_stream_read(s) for s in m.audio_streams],
        video_stream_index=_index(m.video_stream),
        audio_stream_index=_index(m.audio_stream),
        chapters=[to_chapter_read(c) for c in m.chapters],
        unsupported_stream_indices=sorted(m.unsupported_stream_indices),
    )
