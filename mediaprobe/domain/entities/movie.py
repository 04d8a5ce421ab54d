# mediaprobe/domain/entities/movie.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from fractions import Fraction
from typing import Any, Dict, FrozenSet, Optional, Tuple

from mediaprobe.common.logging import get_logger
from mediaprobe.common.path.remote import is_remote
from mediaprobe.domain.entities.audio_stream import AudioStream
from mediaprobe.domain.entities.chapter import Chapter
from mediaprobe.domain.entities.program import Program
from mediaprobe.domain.entities.video_stream import VideoStream
from mediaprobe.domain.policies.metadata_parser import parse_probe_output
from mediaprobe.domain.policies.unsupported_codecs import unsupported_streams
from mediaprobe.domain.policies.validity import invalid_reasons

logger = get_logger(__name__)


@dataclass(frozen=True)
class Movie:
    """
    Everything ffprobe told us about one media resource.

    Built once per probe and never updated; probe again for fresh data.
    `path` is the resource actually probed: for remote resources it is the
    URL after following HTTP redirects.

    `valid` is False when the resource is damaged or undecodable:
      - ffprobe reported a top-level error, or
      - stderr says it could not find codec parameters, or
      - the default video stream and the default audio stream are each
        either missing or using a codec ffprobe does not support.
    These are soft failures: the metadata stays inspectable.
    """
    path: str
    metadata: Dict[str, Any] = field(default_factory=dict, repr=False, hash=False)

    # Format
    duration: float = 0.0
    start_time: float = 0.0
    bitrate: int = 0
    size: int = 0
    container: Optional[str] = None
    container_long_name: Optional[str] = None
    creation_time: Optional[datetime] = None
    format_tags: Dict[str, Any] = field(default_factory=dict, hash=False)
    program_count: int = 0
    stream_count: int = 0

    # Programs / streams / chapters
    programs: Optional[Tuple[Program, ...]] = None
    video_streams: Tuple[VideoStream, ...] = ()
    audio_streams: Tuple[AudioStream, ...] = ()
    video_stream: Optional[VideoStream] = None
    audio_stream: Optional[AudioStream] = None
    chapters: Tuple[Chapter, ...] = ()

    # Validity
    unsupported_stream_indices: FrozenSet[int] = frozenset()
    valid: bool = True

    @classmethod
    def from_probe_output(cls, path: str, metadata: Dict[str, Any], stderr: str = "") -> "Movie":
        """
        Assemble a Movie from ffprobe's parsed JSON (stdout) and its diagnostic text (stderr).
        No I/O happens here; see FFprobeAdapter for running ffprobe.
        """
        parsed = parse_probe_output(metadata)
        unsupported = unsupported_streams(stderr)
        reasons = invalid_reasons(
            parsed.video_stream,
            parsed.audio_stream,
            unsupported,
            has_error=parsed.has_error,
            stderr=stderr,
        )
        if reasons:
            logger.warning("%s is not a valid media resource: %s", path, "; ".join(reasons))

        fmt = parsed.format
        return cls(
            path=path,
            metadata=metadata,
            duration=fmt.duration,
            start_time=fmt.start_time,
            bitrate=fmt.bitrate,
            size=fmt.size,
            container=fmt.container,
            container_long_name=fmt.container_long_name,
            creation_time=fmt.creation_time,
            format_tags=fmt.tags,
            program_count=fmt.program_count,
            stream_count=fmt.stream_count,
            programs=parsed.programs,
            video_streams=parsed.video_streams,
            audio_streams=parsed.audio_streams,
            video_stream=parsed.video_stream,
            audio_stream=parsed.audio_stream,
            chapters=parsed.chapters,
            unsupported_stream_indices=unsupported,
            valid=not reasons,
        )

    # ---- location -------------------------------------------------------------
    @property
    def remote(self) -> bool:
        return is_remote(self.path)

    @property
    def local(self) -> bool:
        return not self.remote

    # ---- default video stream shortcuts --------------------------------------
    @property
    def video_codec(self) -> Optional[str]:
        return self.video_stream.codec_name if self.video_stream else None

    @property
    def pixel_format(self) -> Optional[str]:
        return self.video_stream.pixel_format if self.video_stream else None

    @property
    def colorspace(self) -> Optional[str]:
        return self.video_stream.color_space if self.video_stream else None

    @property
    def width(self) -> Optional[int]:
        return self.video_stream.width if self.video_stream else None

    @property
    def height(self) -> Optional[int]:
        return self.video_stream.height if self.video_stream else None

    @property
    def resolution(self) -> Optional[str]:
        return self.video_stream.resolution if self.video_stream else None

    @property
    def video_bitrate(self) -> Optional[int]:
        return self.video_stream.bitrate if self.video_stream else None

    @property
    def sar(self) -> Optional[str]:
        return self.video_stream.sar if self.video_stream else None

    @property
    def dar(self) -> Optional[str]:
        return self.video_stream.dar if self.video_stream else None

    @property
    def calculated_aspect_ratio(self) -> Optional[float]:
        return self.video_stream.calculated_aspect_ratio if self.video_stream else None

    @property
    def calculated_pixel_aspect_ratio(self) -> Optional[float]:
        return self.video_stream.calculated_pixel_aspect_ratio if self.video_stream else None

    @property
    def frame_rate(self) -> Optional[Fraction]:
        return self.video_stream.frame_rate if self.video_stream else None

    @property
    def rotation(self) -> Optional[int]:
        return self.video_stream.rotation if self.video_stream else None

    # ---- default audio stream shortcuts --------------------------------------
    @property
    def audio_codec(self) -> Optional[str]:
        return self.audio_stream.codec_name if self.audio_stream else None

    @property
    def audio_channels(self) -> Optional[int]:
        return self.audio_stream.channels if self.audio_stream else None

    @property
    def audio_sample_rate(self) -> Optional[int]:
        return self.audio_stream.sample_rate if self.audio_stream else None

    @property
    def audio_bitrate(self) -> Optional[int]:
        return self.audio_stream.bitrate if self.audio_stream else None

    @property
    def audio_tags(self) -> Optional[Dict[str, Any]]:
        return self.audio_stream.tags if self.audio_stream else None

    @property
    def audio_channel_layout(self) -> Optional[str]:
        return self.audio_stream.channel_layout if self.audio_stream else None
