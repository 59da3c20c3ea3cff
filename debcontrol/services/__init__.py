"""이 파일은 .py 서비스 패키지 초기화 모듈로 렌더링 서비스를 노출합니다."""

from .rendering import SUPPORTED_FORMATS, render_files, render_records

__all__ = ["SUPPORTED_FORMATS", "render_files", "render_records"]
