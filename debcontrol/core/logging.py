"""이 파일은 .py 로깅 초기화 모듈로 로그 레벨 해석과 기본 포맷을 설정합니다."""

import logging
import sys
from typing import Optional, TextIO

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(name: str) -> int:
    # "debug", "WARNING" 같은 이름이나 숫자 문자열을 logging 레벨 값으로 바꾼다.
    candidate = name.strip().upper()
    if candidate.isdigit():
        return int(candidate)
    level = logging.getLevelName(candidate)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


def setup_logging(level: str = LOG_LEVEL, stream: Optional[TextIO] = None) -> None:
    # 파싱 결과가 stdout으로 나가므로 로그는 stderr로 분리한다.
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
    )
