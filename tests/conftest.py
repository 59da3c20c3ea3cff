"""이 파일은 .py 테스트 설정 모듈로 경로와 공용 픽스처를 초기화합니다."""

import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

TESTDATA_DIR = REPO_ROOT / "tests" / "testdata"


@pytest.fixture
def nautilus_control() -> Path:
    # 실제 패키지(nautilus-dropbox)의 컨트롤 파일이다.
    return TESTDATA_DIR / "control-nautilus-dropbox"
