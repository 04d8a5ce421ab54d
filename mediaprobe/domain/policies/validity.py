# mediaprobe/domain/policies/validity.py
from __future__ import annotations

from typing import AbstractSet, List, Optional

from mediaprobe.domain.entities.audio_stream import AudioStream
from mediaprobe.domain.entities.video_stream import VideoStream

CODEC_PARAMETERS_PHRASE = "could not find codec parameters"


def _missing_or_unsupported(stream: VideoStream | AudioStream | None, unsupported: AbstractSet[int]) -> bool:
    return stream is None or stream.index in unsupported


def invalid_reasons(
    video_stream: Optional[VideoStream],
    audio_stream: Optional[AudioStream],
    unsupported: AbstractSet[int],
    *,
    has_error: bool,
    stderr: str,
) -> List[str]:
    """
    Why a probed resource is unusable; empty means valid.

    Only the *default* streams count: a file whose default video and default
    audio are both missing or unsupported is invalid even if other streams of
    the same type decode fine.
    """
    reasons: List[str] = []
    if _missing_or_unsupported(video_stream, unsupported) and _missing_or_unsupported(audio_stream, unsupported):
        reasons.append("no usable default video or audio stream")
    if has_error:
        reasons.append("ffprobe reported an error")
    if CODEC_PARAMETERS_PHRASE in (stderr or ""):
        reasons.append("ffprobe could not find codec parameters")
    return reasons


def is_valid(
    video_stream: Optional[VideoStream],
    audio_stream: Optional[AudioStream],
    unsupported: AbstractSet[int],
    *,
    has_error: bool,
    stderr: str,
) -> bool:
    return not invalid_reasons(video_stream, audio_stream, unsupported, has_error=has_error, stderr=stderr)
