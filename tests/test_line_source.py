import io

import pytest

from osuPP.parser import LineSource, ParseIOError, prepare_line


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Mode: 3\n", "Mode: 3"),
        ("Mode: 3\r\n", "Mode: 3"),
        ("64,80,100,1,0 // note\n", "64,80,100,1,0 "),
        ("// comment\n", None),
        ("\n", None),
        ("   \n", None),
        (" indented\n", None),
        ("_underscore\n", None),
    ],
)
def test_prepare_line(raw, expected):
    assert prepare_line(raw) == expected


def test_line_source_skips_empty_lines():
    source = LineSource(io.BytesIO(b"osu file format v14\n\n[General]\n// x\nMode: 1"))

    assert source.next_header() == "osu file format v14\n"
    assert source.next_line() == "[General]"
    assert source.next_line() == "Mode: 1"
    assert source.next_line() is None


def test_line_source_reads_text_streams():
    source = LineSource(io.StringIO("\n\nosu file format v3\n"))

    assert source.next_header() == "osu file format v3\n"
    assert source.next_line() is None


def test_undecodable_bytes():
    source = LineSource(io.BytesIO(b"osu file format v14\n\xff\xfe\xfa\n"))
    source.next_header()

    with pytest.raises(ParseIOError):
        source.next_line()


class _FailingStream:
    def readline(self):
        raise OSError("disk on fire")


def test_read_errors_are_wrapped():
    with pytest.raises(ParseIOError) as info:
        LineSource(_FailingStream()).next_header()

    assert isinstance(info.value.__cause__, OSError)
