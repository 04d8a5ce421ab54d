# services/schemas/probe.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class VideoStreamRead(BaseModel):
    index: Optional[int] = None
    default: bool = False
    codec_name: Optional[str] = Field(None, examples=["h264"])
    codec_long_name: Optional[str] = None
    bitrate: int = 0
    width: Optional[int] = Field(None, description="Display width (rotation applied)")
    height: Optional[int] = Field(None, description="Display height (rotation applied)")
    resolution: Optional[str] = Field(None, examples=["1920x1080"])
    pixel_format: Optional[str] = None
    color_space: Optional[str] = None
    sar: Optional[str] = Field(None, examples=["1:1"])
    dar: Optional[str] = Field(None, examples=["16:9"])
    frame_rate: Optional[str] = Field(None, description="Rational frame rate", examples=["30000/1001"])
    rotation: Optional[int] = None
    calculated_aspect_ratio: Optional[float] = None
    calculated_pixel_aspect_ratio: float = 1.0
    profile: Optional[str] = None
    level: Optional[int] = None
    tags: Dict[str, Any] = Field(default_factory=dict)
    overview: str = ""


class AudioStreamRead(BaseModel):
    index: Optional[int] = None
    default: bool = False
    codec_name: Optional[str] = Field(None, examples=["aac"])
    codec_long_name: Optional[str] = None
    bitrate: int = 0
    channels: int = 0
    sample_rate: int = 0
    channel_layout: Optional[str] = Field(None, examples=["stereo"])
    tags: Dict[str, Any] = Field(default_factory=dict)
    overview: str = ""


class ProgramRead(BaseModel):
    id: Optional[int] = None
    tags: Dict[str, Any] = Field(default_factory=dict)
    video_streams: List[VideoStreamRead] = Field(default_factory=list)
    audio_streams: List[AudioStreamRead] = Field(default_factory=list)
    video_stream_index: Optional[int] = None
    audio_stream_index: Optional[int] = None


class ChapterRead(BaseModel):
    index: Optional[int] = None
    title: Optional[str] = None
    timebase: Optional[str] = Field(None, examples=["1/1000"])
    start: Optional[int] = None
    end: Optional[int] = None
    start_time: float = 0.0
    end_time: float = 0.0


class MovieRead(BaseModel):
    path: str = Field(..., description="Probed path; for URLs, the target after redirects")
    valid: bool
    duration: float = 0.0
    start_time: float = 0.0
    bitrate: int = 0
    size: int = 0
    container: Optional[str] = Field(None, examples=["mov,mp4,m4a,3gp,3g2,mj2"])
    container_long_name: Optional[str] = None
    creation_time: Optional[datetime] = None
    format_tags: Dict[str, Any] = Field(default_factory=dict)
    program_count: int = 0
    stream_count: int = 0

    programs: Optional[List[ProgramRead]] = None
    video_streams: List[VideoStreamRead] = Field(default_factory=list)
    audio_streams: List[AudioStreamRead] = Field(default_factory=list)
    video_stream_index: Optional[int] = None
    audio_stream_index: Optional[int] = None
    chapters: List[ChapterRead] = Field(default_factory=list)
    unsupported_stream_indices: List[int] = Field(default_factory=list)
