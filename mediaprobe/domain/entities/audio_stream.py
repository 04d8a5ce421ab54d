# mediaprobe/domain/entities/audio_stream.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from mediaprobe.common.coerce import maybe_int, to_int
from mediaprobe.domain.entities.stream import fmt, is_default_disposition, stream_tags


@dataclass(frozen=True)
class AudioStream:
    """Typed view over one ffprobe stream record with codec_type == "audio"."""
    index: Optional[int]
    default: bool = False

    codec_name: Optional[str] = None
    codec_long_name: Optional[str] = None
    codec_tag_string: Optional[str] = None
    codec_tag: Optional[str] = None
    bitrate: int = 0
    tags: Dict[str, Any] = field(default_factory=dict, hash=False)

    channels: int = 0
    sample_rate: int = 0
    sample_format: Optional[str] = None
    channel_layout: Optional[str] = None

    @classmethod
    def from_probe(cls, stream: Mapping[str, Any]) -> "AudioStream":
        return cls(
            index=maybe_int(stream.get("index")),
            default=is_default_disposition(stream),
            codec_name=stream.get("codec_name"),
            codec_long_name=stream.get("codec_long_name"),
            codec_tag_string=stream.get("codec_tag_string"),
            codec_tag=stream.get("codec_tag"),
            bitrate=to_int(stream.get("bit_rate")),
            tags=stream_tags(stream),
            channels=to_int(stream.get("channels")),
            sample_rate=to_int(stream.get("sample_rate")),
            sample_format=stream.get("sample_fmt"),
            channel_layout=stream.get("channel_layout"),
        )

    @property
    def overview(self) -> str:
        return (
            f"{fmt(self.codec_name)} ({fmt(self.codec_tag_string)} / {fmt(self.codec_tag)}), "
            f"{self.sample_rate} Hz, {fmt(self.channel_layout)}, {fmt(self.sample_format)}, "
            f"{self.bitrate} bit/s"
        )
