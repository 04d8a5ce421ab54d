# mediaprobe/domain/enums/codec_type.py
from __future__ import annotations

from enum import StrEnum


class CodecType(StrEnum):
    """Values ffprobe reports in a stream record's ``codec_type``."""
    VIDEO = "video"
    AUDIO = "audio"
    SUBTITLE = "subtitle"
    DATA = "data"
    ATTACHMENT = "attachment"
