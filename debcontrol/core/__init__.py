"""이 파일은 .py 코어 패키지 초기화 모듈로 주요 심볼을 재노출합니다."""

from .config import DEFAULT_ENCODING, LINE_BUFFER_SIZE
from .errors import (
    ControlParseError,
    ControlReadError,
    LineTooLongError,
    MalformedKeyError,
)
from .logging import setup_logging
from .lookup import to_lookup
from .parser import parse, parse_bytes, parse_file, parse_text
from .types import Record, RecordSequence

__all__ = [
    "ControlParseError",
    "ControlReadError",
    "DEFAULT_ENCODING",
    "LINE_BUFFER_SIZE",
    "LineTooLongError",
    "MalformedKeyError",
    "Record",
    "RecordSequence",
    "parse",
    "parse_bytes",
    "parse_file",
    "parse_text",
    "setup_logging",
    "to_lookup",
]
