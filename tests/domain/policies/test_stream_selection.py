from mediaprobe.domain.entities.audio_stream import AudioStream
from mediaprobe.domain.enums import CodecType
from mediaprobe.domain.policies.stream_selection import select_default, streams_for_type


def test_select_default_prefers_flagged_stream():
    streams = (AudioStream(index=0), AudioStream(index=1, default=True), AudioStream(index=2, default=True))
    assert select_default(streams).index == 1


def test_select_default_falls_back_to_first_then_none():
    assert select_default((AudioStream(index=4), AudioStream(index=5))).index == 4
    assert select_default(()) is None


def test_streams_for_type_ignores_junk():
    records = [{"codec_type": "audio"}, "garbage", {"codec_type": "video"}, {}]
    assert streams_for_type(records, CodecType.AUDIO) == [{"codec_type": "audio"}]
    assert streams_for_type(None, CodecType.VIDEO) == []
