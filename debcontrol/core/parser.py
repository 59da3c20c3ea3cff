"""이 파일은 .py 파서 모듈로 데비안 컨트롤 파일 형식의 키/값 레코드를 읽습니다.

컨트롤 파일은 ``Key: value`` 형태의 줄로 이루어진다. 공백 한 칸으로 시작하는
다음 줄은 앞 값의 연속 줄이며, 값 안의 ``#`` 이후는 주석으로 버려진다::

    Package: mypackage
    Version: 4.5.0 # this is a comment
    Description: Hello
     world

위 예시의 Description 값은 ``"Hello\\nworld"`` 가 된다. 값의 앞뒤 공백은
항상 제거된다.
"""

from __future__ import annotations

import codecs
import io
import logging
from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple, Union

from .config import DEFAULT_ENCODING, LINE_BUFFER_SIZE
from .errors import ControlReadError, LineTooLongError, MalformedKeyError
from .types import Record, RecordSequence

logger = logging.getLogger(__name__)

KEY_SEPARATOR = ": "
COMMENT_CHAR = "#"
CONTINUATION_BYTE = b" "
# 디코딩할 수 없는 바이트는 서로게이트로 보존해 원래 바이트로 되돌릴 수 있게 한다.
DECODE_ERRORS = "surrogateescape"


class LineReader:
    """고정 크기 버퍼로 바이트 스트림을 한 줄씩 읽고 다음 1바이트를 미리 봅니다."""

    def __init__(
        self,
        stream: BinaryIO,
        buffer_size: int = LINE_BUFFER_SIZE,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be >= 1")
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {encoding}") from exc
        self.stream = stream
        self.buffer_size = buffer_size
        self.encoding = encoding
        self.line_number = 0
        self._buffer = bytearray()
        self._eof = False

    def read_line(self) -> Optional[str]:
        # 종료 문자(\n, \r\n)를 뺀 한 줄을 반환하고 스트림 끝이면 None을 반환한다.
        while True:
            end = self._buffer.find(b"\n")
            if end >= 0:
                raw = bytes(self._buffer[:end])
                del self._buffer[: end + 1]
                if raw.endswith(b"\r"):
                    raw = raw[:-1]
                return self._decode(raw)
            # 종료 문자 없이 버퍼가 가득 찼다면 줄이 버퍼에 들어가지 않는다.
            if len(self._buffer) >= self.buffer_size:
                raise LineTooLongError(self.buffer_size, self.line_number + 1)
            if self._eof:
                if not self._buffer:
                    return None
                raw = bytes(self._buffer)
                self._buffer.clear()
                return self._decode(raw)
            self._fill()

    def peek(self) -> Optional[bytes]:
        # 소비하지 않고 다음 1바이트를 돌려준다. 스트림 끝이면 None.
        if not self._buffer and not self._eof:
            self._fill()
        if not self._buffer:
            return None
        return bytes(self._buffer[:1])

    def _fill(self) -> None:
        try:
            chunk = self.stream.read(self.buffer_size - len(self._buffer))
        except OSError as exc:
            raise ControlReadError(f"failed to read control stream: {exc}") from exc
        if isinstance(chunk, str):
            raise TypeError("control stream must be opened in binary mode")
        if not chunk:
            self._eof = True
            return
        self._buffer.extend(chunk)

    def _decode(self, raw: bytes) -> str:
        self.line_number += 1
        return raw.decode(self.encoding, DECODE_ERRORS)


def parse(
    stream: BinaryIO,
    *,
    buffer_size: int = LINE_BUFFER_SIZE,
    encoding: str = DEFAULT_ENCODING,
) -> RecordSequence:
    """컨트롤 파일 형식의 바이트 스트림을 입력 순서대로 레코드로 변환합니다.

    줄이 라인 버퍼를 넘거나 키에 주석이 있거나 스트림 읽기에 실패하면
    ControlParseError 하위 예외를 던지며, 이 경우 부분 결과는 없습니다.
    """

    reader = LineReader(stream, buffer_size, encoding)
    records: List[Record] = []

    while True:
        line = reader.read_line()
        if line is None:
            break

        split = _split_key(line, reader.line_number)
        if split is None:
            continue
        key, fragment = split

        parts = [_strip_comment(fragment)]
        while reader.peek() == CONTINUATION_BYTE:
            continuation = reader.read_line() or ""
            # 선행 공백 한 칸을 개행으로 바꿔 앞 조각과 잇는다.
            parts.append(_strip_comment("\n" + continuation[1:]))

        records.append(Record(key=key, value="".join(parts).strip()))

    logger.debug("Parsed %d records from %d lines", len(records), reader.line_number)
    return tuple(records)


def parse_bytes(
    data: bytes,
    *,
    buffer_size: int = LINE_BUFFER_SIZE,
    encoding: str = DEFAULT_ENCODING,
) -> RecordSequence:
    return parse(io.BytesIO(data), buffer_size=buffer_size, encoding=encoding)


def parse_text(text: str, *, buffer_size: int = LINE_BUFFER_SIZE) -> RecordSequence:
    # 이미 디코딩된 문자열이므로 UTF-8로 되돌려 같은 경로로 파싱한다.
    # 서로게이트로 보존된 바이트도 원래 값 그대로 되돌아간다.
    data = text.encode("utf-8", DECODE_ERRORS)
    return parse_bytes(data, buffer_size=buffer_size, encoding="utf-8")


def parse_file(
    path: Union[str, Path],
    *,
    buffer_size: int = LINE_BUFFER_SIZE,
    encoding: str = DEFAULT_ENCODING,
) -> RecordSequence:
    # 파일 열기 실패(OSError)는 파싱 오류가 아니므로 그대로 전달한다.
    file_path = Path(path)
    with file_path.open("rb") as handle:
        records = parse(handle, buffer_size=buffer_size, encoding=encoding)
    logger.debug("Loaded %d records from %s", len(records), file_path)
    return records


def _split_key(line: str, line_number: int) -> Optional[Tuple[str, str]]:
    # 키 구분자(": ")를 찾을 때까지 한 글자씩 검사한다.
    for idx, char in enumerate(line):
        if char == COMMENT_CHAR:
            # 줄 머리의 '#'는 주석 줄이므로 레코드를 만들지 않는다.
            if idx == 0:
                return None
            logger.debug("Comment in key section at line %d, column %d", line_number, idx + 1)
            raise MalformedKeyError(line_number, idx + 1)
        if line.startswith(KEY_SEPARATOR, idx):
            return line[:idx], line[idx + len(KEY_SEPARATOR) :]
    # 구분자가 없으면 키는 비우고 줄 전체를 값 조각으로 쓴다.
    return "", line


def _strip_comment(fragment: str) -> str:
    # 첫 '#'부터 줄 끝까지는 값에 포함하지 않는다.
    return fragment.split(COMMENT_CHAR, 1)[0]
