"""이 파일은 .py 패키지 초기화 모듈로 데비안 컨트롤 파일 파서를 노출합니다."""

from .core import Record, parse, parse_bytes, parse_file, parse_text, to_lookup

__version__ = "0.1.0"

__all__ = ["Record", "__version__", "parse", "parse_bytes", "parse_file", "parse_text", "to_lookup"]
