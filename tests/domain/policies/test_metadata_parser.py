from mediaprobe.domain.policies.metadata_parser import (
    has_probe_error,
    parse_format,
    parse_probe_output,
)


def _s(index, codec_type, default=0, **extra):
    d = {"index": index, "codec_type": codec_type, "disposition": {"default": default}}
    d.update(extra)
    return d


def test_filters_streams_by_type_in_probe_order():
    parsed = parse_probe_output({
        "format": {},
        "streams": [
            _s(0, "video"),
            _s(1, "audio"),
            _s(2, "subtitle"),
            _s(3, "video"),
            _s(4, "audio"),
            {"index": 5},  # no codec_type at all
        ],
    })
    assert [s.index for s in parsed.video_streams] == [0, 3]
    assert [s.index for s in parsed.audio_streams] == [1, 4]


def test_default_stream_selection():
    parsed = parse_probe_output({
        "streams": [_s(0, "video"), _s(1, "video", default=1), _s(2, "audio"), _s(3, "audio")],
    })
    assert parsed.video_stream.index == 1
    # none flagged -> first
    assert parsed.audio_stream.index == 2


def test_no_streams_section():
    parsed = parse_probe_output({"format": {"format_name": "mp3"}})
    assert parsed.video_streams == ()
    assert parsed.audio_streams == ()
    assert parsed.video_stream is None
    assert parsed.audio_stream is None
    assert parsed.programs is None


def test_programs_are_parsed_with_their_own_streams():
    parsed = parse_probe_output({
        "programs": [
            {"program_id": 1, "streams": [_s(0, "video"), _s(1, "audio")]},
            {"program_id": 2, "streams": [_s(2, "video"), _s(3, "audio", default=1), _s(4, "audio")]},
        ],
        "streams": [_s(0, "video"), _s(1, "audio"), _s(2, "video"), _s(3, "audio", default=1), _s(4, "audio")],
    })
    assert [p.id for p in parsed.programs] == [1, 2]
    second = parsed.programs[1]
    assert second.video_stream.index == 2
    assert second.audio_stream.index == 3
    # movie-level selection sees the flat list
    assert parsed.audio_stream.index == 3


def test_permissive_numeric_coercion():
    fmt = parse_format({
        "size": "N/A",
        "duration": "",
        "bit_rate": None,
        "start_time": "1.5",
        "nb_streams": "3",
    })
    assert fmt.size == 0
    assert fmt.duration == 0.0
    assert fmt.bitrate == 0
    assert fmt.start_time == 1.5
    assert fmt.stream_count == 3
    assert fmt.program_count == 0
    assert fmt.tags == {}
    assert fmt.creation_time is None


def test_error_record_skips_everything(probe_error):
    probe_error["streams"] = [_s(0, "video")]
    probe_error["format"] = {"duration": "10.0", "format_name": "mov"}
    assert has_probe_error(probe_error)

    parsed = parse_probe_output(probe_error)
    assert parsed.has_error is True
    assert parsed.format.duration == 0
    assert parsed.format.container is None
    assert parsed.video_streams == ()
    assert parsed.programs is None


def test_chapters_when_present():
    parsed = parse_probe_output({
        "streams": [],
        "chapters": [
            {"id": 0, "time_base": "1/1000", "start": 0, "end": 5000,
             "start_time": "0.000000", "end_time": "5.000000", "tags": {"title": "Intro"}},
            {"id": 1, "time_base": "1/1000", "start": 5000, "end": 9000,
             "start_time": "5.000000", "end_time": "9.000000", "tags": {"title": "Main"}},
        ],
    })
    assert [c.title for c in parsed.chapters] == ["Intro", "Main"]
