"""이 파일은 .py 명령행 모듈로 컨트롤 파일을 읽어 결과를 출력합니다.

Usage:
  debcontrol FILE [FILE ...] [--format json|yaml|text] [--lookup]
  debcontrol FILE --field Package --field Version

'-' 는 표준 입력을 뜻한다.
"""

from __future__ import annotations

import argparse
import codecs
import logging
import sys
from typing import Dict, List, Optional

from debcontrol import __version__
from debcontrol.core.config import DEFAULT_ENCODING, LINE_BUFFER_SIZE, LOG_LEVEL
from debcontrol.core.errors import ControlParseError
from debcontrol.core.logging import resolve_level, setup_logging
from debcontrol.core.lookup import to_lookup
from debcontrol.core.parser import parse, parse_file
from debcontrol.core.types import RecordSequence
from debcontrol.services.rendering import SUPPORTED_FORMATS, render_files, render_records

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="debcontrol",
        description=f"Debian control file reader v{__version__}",
    )
    parser.add_argument("files", nargs="+", metavar="FILE", help="Control file to read ('-' for stdin)")
    parser.add_argument("--format", "-f", choices=sorted(SUPPORTED_FORMATS), default="text", help="Output format")
    parser.add_argument("--lookup", action="store_true", help="Fold records into a key/value mapping (last duplicate wins)")
    parser.add_argument("--field", action="append", default=[], metavar="KEY", help="Print only the value of KEY (can repeat)")
    parser.add_argument("--buffer-size", type=int, default=LINE_BUFFER_SIZE, help="Maximum line length in bytes")
    parser.add_argument("--encoding", default=DEFAULT_ENCODING, help="Input encoding")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.buffer_size < 1:
        parser.error("--buffer-size must be >= 1")
    try:
        codecs.lookup(args.encoding)
    except LookupError:
        parser.error(f"unknown encoding: {args.encoding}")
    try:
        resolve_level(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    setup_logging(args.log_level)

    results: Dict[str, RecordSequence] = {}
    status = 0
    for path in args.files:
        try:
            results[path] = _read_records(path, args.buffer_size, args.encoding)
        except ControlParseError as exc:
            # 파싱 실패한 파일은 건너뛰고 종료 코드로 알린다.
            logger.warning("Failed to parse %s: %s", path, exc)
            print(f"{path}: {exc}", file=sys.stderr)
            status = 1
        except OSError as exc:
            logger.warning("Failed to open %s: %s", path, exc)
            print(f"{path}: {exc.strerror or exc}", file=sys.stderr)
            status = 1

    if args.field:
        for records in results.values():
            _print_fields(records, args.field)
        return status

    if len(results) == 1:
        output = render_records(next(iter(results.values())), args.format, lookup=args.lookup)
    elif results:
        output = render_files(results, args.format, lookup=args.lookup)
    else:
        return status
    if output:
        _emit(output)
    return status


def _read_records(path: str, buffer_size: int, encoding: str) -> RecordSequence:
    if path == STDIN_PATH:
        return parse(sys.stdin.buffer, buffer_size=buffer_size, encoding=encoding)
    return parse_file(path, buffer_size=buffer_size, encoding=encoding)


def _print_fields(records: RecordSequence, keys: List[str]) -> None:
    # 없는 키는 조용히 건너뛴다.
    lookup = to_lookup(records)
    for key in keys:
        if key in lookup:
            _emit(lookup[key])


def _emit(text: str) -> None:
    # 디코딩하지 못해 서로게이트로 보존된 바이트는 원래 바이트 그대로 쓴다.
    data = text.encode("utf-8", "surrogateescape") + b"\n"
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(data.decode("utf-8", "replace"))
        return
    sys.stdout.flush()
    buffer.write(data)
    buffer.flush()


if __name__ == "__main__":
    raise SystemExit(main())
