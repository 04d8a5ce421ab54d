from mediaprobe.domain.policies.unsupported_codecs import unsupported_streams


def test_detects_stream_index():
    assert unsupported_streams("Unsupported codec with id 4 for input stream 2") == {2}


def test_multiple_lines_and_noise():
    stderr = (
        "ffprobe version 6.0 Copyright (c) 2007-2023 the FFmpeg developers\n"
        "Unsupported codec with id 100359 for input stream 0\r\n"
        "  Stream #0:0: Video: none\n"
        "Unsupported codec with id 86018 for input stream 3\n"
        "Unsupported codec with id 86018 for input stream 3\n"
    )
    assert unsupported_streams(stderr) == {0, 3}


def test_no_pattern_yields_empty_set():
    assert unsupported_streams("") == frozenset()
    assert unsupported_streams("Input #0, mov,mp4,m4a,3gp,3g2,mj2, from 'x.mov':") == frozenset()


def test_pattern_must_span_the_whole_line():
    assert unsupported_streams("note: Unsupported codec with id 4 for input stream 2") == frozenset()
    assert unsupported_streams("Unsupported codec with id 4 for input stream 2 (ignored)") == frozenset()
