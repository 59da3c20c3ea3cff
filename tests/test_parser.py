"""이 파일은 .py 테스트 모듈로 컨트롤 파일 파서 동작을 검증합니다."""

import io

from debcontrol.core.errors import (
    ControlParseError,
    ControlReadError,
    LineTooLongError,
    MalformedKeyError,
)
from debcontrol.core.parser import parse, parse_bytes, parse_file, parse_text
from debcontrol.core.types import Record

NAUTILUS_DROPBOX_EXPECTED = (
    Record("Package", "nautilus-dropbox"),
    Record("Version", "0.6.9"),
    Record("Architecture", "amd64"),
    Record("Maintainer", "Rian Hunter <rian@dropbox.com>"),
    Record("Installed-Size", "460"),
    Record(
        "Depends",
        "libatk1.0-0 (>= 1.20.0), libc6 (>= 2.4), libcairo2 (>= 1.6.0), "
        "libglib2.0-0 (>= 2.16.0), libgtk2.0-0 (>= 2.12.0), "
        "libnautilus-extension1 (>= 1:2.22.2), libpango1.0-0 (>= 1.20.1), "
        "python (>= 2.5), python-gtk2 (>= 2.12)",
    ),
    Record("Suggests", "nautilus (>= 2.16.0)"),
    Record("Section", "gnome"),
    Record("Priority", "optional"),
    Record(
        "Description",
        "Dropbox integration for Nautilus\n"
        "Nautilus Dropbox is an extension that integrates\n"
        "the Dropbox web service with your GNOME Desktop.\n"
        ".\n"
        "Check us out at http://www.dropbox.com/",
    ),
)


class _FailingStream:
    # 첫 read 호출에서 I/O 오류를 일으키는 스트림이다.
    def read(self, size: int = -1) -> bytes:
        raise OSError("device not ready")


class _TrickleStream:
    # 한 번에 한 바이트씩만 돌려주는 스트림이다.
    def __init__(self, data: bytes) -> None:
        self._data = data

    def read(self, size: int = -1) -> bytes:
        chunk, self._data = self._data[:1], self._data[1:]
        return chunk


def test_parse_single_line_records_in_order() -> None:
    records = parse_text("A: 0\nB: 1\nC: 2")
    assert records == (Record("A", "0"), Record("B", "1"), Record("C", "2"))


def test_parse_joins_continuation_lines_with_newline() -> None:
    records = parse_text("Test: This text\n spans multiple lines")
    assert records == (Record("Test", "This text\nspans multiple lines"),)


def test_parse_trims_value_whitespace() -> None:
    records = parse_text("A: are we getting trimmed?      ")
    assert records == (Record("A", "are we getting trimmed?"),)


def test_parse_strips_trailing_comment() -> None:
    records = parse_text("A: are we getting trimmed? # why yes, yes of course!")
    assert records == (Record("A", "are we getting trimmed?"),)


def test_parse_strips_comment_on_each_continuation_line() -> None:
    text = "Description: first # hidden\n second # also hidden\n third\nNext: 1\n"
    records = parse_text(text)
    assert records == (
        Record("Description", "first \nsecond \nthird"),
        Record("Next", "1"),
    )


def test_parse_skips_comment_lines() -> None:
    text = "# leading comment\nA: 1\n# between records\nB: 2\n"
    assert parse_text(text) == (Record("A", "1"), Record("B", "2"))


def test_parse_rejects_comment_in_key() -> None:
    try:
        parse_text("KeyComment#: Blah")
    except MalformedKeyError as exc:
        assert exc.line_number == 1
        assert exc.column == 11
        assert "comment" in str(exc)
    else:
        raise AssertionError("MalformedKeyError not raised")


def test_parse_rejects_comment_in_line_without_separator() -> None:
    try:
        parse_text("A: 1\nno separator # here\n")
    except MalformedKeyError as exc:
        assert exc.line_number == 2
    else:
        raise AssertionError("MalformedKeyError not raised")


def test_parse_keeps_duplicate_keys_as_separate_records() -> None:
    records = parse_text("Tag: one\nTag: two\n")
    assert records == (Record("Tag", "one"), Record("Tag", "two"))


def test_parse_line_without_separator_has_empty_key() -> None:
    records = parse_text("A: 1\nplain value\nKey:no-space\n")
    assert records == (
        Record("A", "1"),
        Record("", "plain value"),
        Record("", "Key:no-space"),
    )


def test_parse_blank_line_yields_empty_record() -> None:
    records = parse_text("A: 1\n\nB: 2\n")
    assert records == (Record("A", "1"), Record("", ""), Record("B", "2"))


def test_parse_tab_is_not_continuation() -> None:
    records = parse_text("A: 1\n\tB: 2\n")
    assert records == (Record("A", "1"), Record("\tB", "2"))


def test_parse_handles_crlf_line_endings() -> None:
    records = parse_bytes(b"A: 1\r\nDescription: a\r\n b\r\n")
    assert records == (Record("A", "1"), Record("Description", "a\nb"))


def test_parse_empty_input() -> None:
    assert parse_bytes(b"") == ()


def test_parse_reads_real_control_file(nautilus_control) -> None:
    assert parse_file(nautilus_control) == NAUTILUS_DROPBOX_EXPECTED


def test_parse_small_reads_match_full_reads(nautilus_control) -> None:
    data = nautilus_control.read_bytes()
    assert parse(_TrickleStream(data)) == parse_bytes(data)


def test_parse_line_too_long() -> None:
    try:
        parse_bytes(b"A: " + b"x" * 20, buffer_size=16)
    except LineTooLongError as exc:
        assert exc.limit == 16
        assert exc.line_number == 1
    else:
        raise AssertionError("LineTooLongError not raised")


def test_parse_continuation_line_too_long() -> None:
    try:
        parse_bytes(b"A: x\n " + b"y" * 20 + b"\n", buffer_size=16)
    except LineTooLongError as exc:
        assert exc.line_number == 2
    else:
        raise AssertionError("LineTooLongError not raised")


def test_parse_line_that_fills_buffer_with_terminator() -> None:
    line = b"A: " + b"x" * 12 + b"\n"
    assert len(line) == 16
    assert parse_bytes(line, buffer_size=16) == (Record("A", "x" * 12),)


def test_parse_wraps_stream_errors() -> None:
    try:
        parse(_FailingStream())
    except ControlReadError as exc:
        assert isinstance(exc.__cause__, OSError)
        assert "device not ready" in str(exc)
    else:
        raise AssertionError("ControlReadError not raised")


def test_parse_keeps_bytes_outside_encoding() -> None:
    # Latin-1 파일을 기본 UTF-8로 읽어도 실패하지 않고 바이트가 보존된다.
    records = parse_bytes(b"Maintainer: J\xfcrgen\nB: \xff\n")
    assert [record.key for record in records] == ["Maintainer", "B"]
    assert records[0].value.encode("utf-8", "surrogateescape") == b"J\xfcrgen"
    assert records[1].value.encode("utf-8", "surrogateescape") == b"\xff"


def test_parse_decodes_with_requested_encoding() -> None:
    records = parse_bytes(b"Maintainer: J\xfcrgen\n", encoding="latin-1")
    assert records == (Record("Maintainer", "J\u00fcrgen"),)


def test_parse_rejects_unknown_encoding() -> None:
    try:
        parse_bytes(b"A: 1\n", encoding="nope")
    except ValueError as exc:
        assert "nope" in str(exc)
    else:
        raise AssertionError("ValueError not raised")


def test_parse_text_round_trips_preserved_bytes() -> None:
    original = parse_bytes(b"Maintainer: J\xfcrgen\n")
    text = "Maintainer: " + original[0].value + "\n"
    assert parse_text(text) == original


def test_parse_text_stream_is_rejected() -> None:
    try:
        parse(io.StringIO("A: 1"))
    except TypeError:
        pass
    else:
        raise AssertionError("TypeError not raised")


def test_parse_errors_share_base_class() -> None:
    for error in (LineTooLongError, MalformedKeyError, ControlReadError):
        assert issubclass(error, ControlParseError)
        assert issubclass(error, ValueError)


def test_parse_decodes_non_ascii_values() -> None:
    records = parse_text("Maintainer: Jürgen Müller <jm@example.org>\n")
    assert records == (Record("Maintainer", "Jürgen Müller <jm@example.org>"),)
