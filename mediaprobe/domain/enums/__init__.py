from mediaprobe.domain.enums.codec_type import CodecType

__all__ = [
    "CodecType",
]
