# mediaprobe/domain/entities/video_stream.py
from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Dict, Mapping, Optional, Tuple

from mediaprobe.common.coerce import maybe_int, to_fraction, to_int
from mediaprobe.domain.entities.stream import fmt, is_default_disposition, stream_tags


@dataclass(frozen=True)
class VideoStream:
    """
    Typed view over one ffprobe stream record with codec_type == "video".

    `raw_width` / `raw_height` are the decode dimensions ffprobe reports.
    `width` / `height` are display dimensions: swapped when the stream carries
    a 90 or 270 degree rotation (from the `rotate` tag or the display matrix
    side data).
    """
    index: Optional[int]
    default: bool = False

    codec_name: Optional[str] = None
    codec_long_name: Optional[str] = None
    codec_tag_string: Optional[str] = None
    codec_tag: Optional[str] = None
    bitrate: int = 0
    tags: Dict[str, Any] = field(default_factory=dict, hash=False)

    raw_width: Optional[int] = None
    raw_height: Optional[int] = None
    pixel_format: Optional[str] = None
    color_space: Optional[str] = None
    sar: Optional[str] = None
    dar: Optional[str] = None
    frame_rate: Optional[Fraction] = None
    profile: Optional[str] = None
    level: Optional[int] = None
    side_data_list: Tuple[Dict[str, Any], ...] = field(default=(), hash=False)

    @classmethod
    def from_probe(cls, stream: Mapping[str, Any]) -> "VideoStream":
        side_data = stream.get("side_data_list") or []
        return cls(
            index=maybe_int(stream.get("index")),
            default=is_default_disposition(stream),
            codec_name=stream.get("codec_name"),
            codec_long_name=stream.get("codec_long_name"),
            codec_tag_string=stream.get("codec_tag_string"),
            codec_tag=stream.get("codec_tag"),
            bitrate=to_int(stream.get("bit_rate")),
            tags=stream_tags(stream),
            raw_width=maybe_int(stream.get("width")),
            raw_height=maybe_int(stream.get("height")),
            pixel_format=stream.get("pix_fmt"),
            color_space=stream.get("color_space"),
            sar=stream.get("sample_aspect_ratio"),
            dar=stream.get("display_aspect_ratio"),
            frame_rate=to_fraction(stream.get("avg_frame_rate")),
            profile=stream.get("profile"),
            level=maybe_int(stream.get("level")),
            side_data_list=tuple(dict(d) for d in side_data if isinstance(d, Mapping)),
        )

    # ---- rotation-aware geometry ---------------------------------------------
    @property
    def rotation(self) -> Optional[int]:
        """Degrees in [0, 360): the `rotate` tag wins over display-matrix side data."""
        if "rotate" in self.tags:
            return to_int(self.tags["rotate"]) % 360
        for data in self.side_data_list:
            if "rotation" in data:
                return to_int(data["rotation"]) % 360
        return None

    @property
    def is_rotated(self) -> bool:
        """True when display orientation is a quarter turn from decode orientation."""
        return self.rotation not in (None, 0, 180)

    @property
    def width(self) -> Optional[int]:
        return self.raw_height if self.is_rotated else self.raw_width

    @property
    def height(self) -> Optional[int]:
        return self.raw_width if self.is_rotated else self.raw_height

    @property
    def resolution(self) -> Optional[str]:
        if self.width is None or self.height is None:
            return None
        return f"{self.width}x{self.height}"

    @property
    def calculated_aspect_ratio(self) -> Optional[float]:
        """DAR when usable, else width / height in display orientation."""
        aspect = self._calculate_aspect(self.dar)
        if aspect is not None:
            return aspect
        return self._aspect_from_dimensions()

    @property
    def calculated_pixel_aspect_ratio(self) -> float:
        aspect = self._calculate_aspect(self.sar)
        return aspect if aspect is not None else 1.0

    @property
    def overview(self) -> str:
        return (
            f"{fmt(self.codec_name)} ({fmt(self.profile)}) "
            f"({fmt(self.codec_tag_string)} / {fmt(self.codec_tag)}), "
            f"{fmt(self.pixel_format)}, {fmt(self.resolution)} "
            f"[SAR {fmt(self.sar)} DAR {fmt(self.dar)}]"
        )

    # ---- internals ------------------------------------------------------------
    def _calculate_aspect(self, ratio: Optional[str]) -> Optional[float]:
        # SAR/DAR are "w:h" relative to decode orientation
        if not ratio or ":" not in ratio:
            return None
        w_s, h_s = ratio.split(":", 1)
        try:
            w, h = float(w_s), float(h_s)
        except ValueError:
            return None
        if w == 0 or h == 0:
            return None
        return h / w if self.is_rotated else w / h

    def _aspect_from_dimensions(self) -> Optional[float]:
        if not self.width or not self.height:
            return None
        return self.width / self.height
