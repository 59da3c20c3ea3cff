"""이 파일은 .py 설정 모듈로 파서와 API 기본값을 정의합니다."""

import os

# 한 물리 라인이 들어가야 하는 내부 버퍼 크기(바이트)이다.
LINE_BUFFER_SIZE = int(os.getenv("DEBCONTROL_LINE_BUFFER", "4096"))
DEFAULT_ENCODING = os.getenv("DEBCONTROL_ENCODING", "utf-8")
LOG_LEVEL = os.getenv("DEBCONTROL_LOG_LEVEL", "INFO")
API_PREFIX = "/api/v1"
