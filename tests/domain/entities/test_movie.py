from __future__ import annotations

import dataclasses
from datetime import datetime, timezone
from fractions import Fraction

import pytest

from mediaprobe.domain.entities.movie import Movie


def test_movie_from_fixture_is_deterministic(awesome_probe):
    m = Movie.from_probe_output("awesome movie.mov", awesome_probe, "")

    assert m.valid is True
    assert m.path == "awesome movie.mov"
    assert m.container == "mov,mp4,m4a,3gp,3g2,mj2"
    assert m.container_long_name == "QuickTime / MOV"
    assert m.duration == pytest.approx(7.56)
    assert m.start_time == 0.0
    assert m.size == 455546
    assert m.bitrate == 482059
    assert m.stream_count == 2
    assert m.program_count == 0
    assert m.creation_time == datetime(2010, 5, 26, 8, 36, 1, tzinfo=timezone.utc)
    assert m.format_tags["major_brand"] == "qt  "

    assert m.programs == ()
    assert len(m.video_streams) == 1
    assert len(m.audio_streams) == 1
    assert m.video_stream.index == 0
    assert m.audio_stream.index == 1
    assert m.chapters == ()
    assert m.unsupported_stream_indices == frozenset()
    assert m.metadata is awesome_probe


def test_movie_shortcuts_delegate_to_default_streams(awesome_probe):
    m = Movie.from_probe_output("awesome movie.mov", awesome_probe, "")

    assert m.video_codec == "h264"
    assert m.pixel_format == "yuv420p"
    assert m.colorspace == "bt709"
    assert (m.width, m.height) == (640, 480)
    assert m.resolution == "640x480"
    assert m.video_bitrate == 371185
    assert m.sar == "1:1"
    assert m.dar == "4:3"
    assert m.calculated_aspect_ratio == pytest.approx(4 / 3)
    assert m.calculated_pixel_aspect_ratio == 1.0
    assert m.frame_rate == Fraction(250, 11)
    assert m.rotation is None

    assert m.audio_codec == "aac"
    assert m.audio_channels == 1
    assert m.audio_sample_rate == 44100
    assert m.audio_bitrate == 109056
    assert m.audio_channel_layout == "mono"
    assert m.audio_tags == {"language": "und", "handler_name": "SoundHandler"}


def test_movie_shortcuts_are_none_without_streams(awesome_probe):
    awesome_probe["streams"] = []
    m = Movie.from_probe_output("x.mov", awesome_probe, "")
    assert m.video_stream is None
    assert m.audio_stream is None
    assert m.width is None
    assert m.audio_codec is None
    assert m.calculated_pixel_aspect_ratio is None
    assert m.valid is False


def test_movie_is_immutable(awesome_probe):
    m = Movie.from_probe_output("x.mov", awesome_probe, "")
    with pytest.raises(dataclasses.FrozenInstanceError):
        m.valid = False  # type: ignore[misc]


def test_probe_error_record_forces_invalid_and_zero_duration(probe_error):
    m = Movie.from_probe_output("broken.mov", probe_error, "")
    assert m.valid is False
    assert m.duration == 0
    assert m.container is None
    assert m.video_streams == ()
    assert m.audio_streams == ()
    assert m.programs is None


def test_video_only_movie_validity_depends_on_unsupported_set():
    metadata = {
        "format": {"format_name": "h264", "duration": "1.0"},
        "streams": [{"index": 0, "codec_type": "video", "codec_name": "h264", "disposition": {"default": 1}}],
    }
    assert Movie.from_probe_output("v.h264", metadata, "").valid is True

    stderr = "Unsupported codec with id 27 for input stream 0\n"
    m = Movie.from_probe_output("v.h264", metadata, stderr)
    assert m.unsupported_stream_indices == frozenset({0})
    assert m.valid is False


def test_audio_survives_unsupported_video(awesome_probe):
    stderr = "Unsupported codec with id 100359 for input stream 0\n"
    m = Movie.from_probe_output("x.mov", awesome_probe, stderr)
    assert m.valid is True


def test_both_default_streams_unsupported_is_invalid(awesome_probe):
    stderr = (
        "Unsupported codec with id 100359 for input stream 0\n"
        "Unsupported codec with id 86018 for input stream 1\n"
    )
    m = Movie.from_probe_output("x.mov", awesome_probe, stderr)
    assert m.valid is False


def test_codec_parameters_phrase_is_invalid(awesome_probe):
    stderr = "[mov,mp4,m4a,3gp,3g2,mj2 @ 0x7f] could not find codec parameters for stream 0\n"
    m = Movie.from_probe_output("x.mov", awesome_probe, stderr)
    assert m.valid is False


def test_remote_and_local_classification(awesome_probe):
    assert Movie.from_probe_output("https://example.com/a.mp4", awesome_probe).remote is True
    local = Movie.from_probe_output("/tmp/a.mp4", awesome_probe)
    assert local.remote is False
    assert local.local is True


def test_malformed_creation_time_is_absent(awesome_probe):
    awesome_probe["format"]["tags"]["creation_time"] = "not a date"
    m = Movie.from_probe_output("x.mov", awesome_probe, "")
    assert m.creation_time is None
    assert m.valid is True


def test_movie_and_streams_are_hashable(awesome_probe):
    m = Movie.from_probe_output("awesome movie.mov", awesome_probe, "")
    again = Movie.from_probe_output("awesome movie.mov", awesome_probe, "")

    assert hash(m) == hash(again)
    assert {m.video_stream, m.audio_stream, again.video_stream} == {m.video_stream, m.audio_stream}
    assert {m: "seen"}[again] == "seen"
