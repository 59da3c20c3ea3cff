"""이 파일은 .py API 스키마 모듈로 요청/응답 모델을 정의합니다."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from debcontrol.core.config import LINE_BUFFER_SIZE


class ParseRequest(BaseModel):
    # 파싱할 컨트롤 파일 본문을 문자열로 받는다.
    content: str
    # lookup이 True면 키→값 매핑도 함께 돌려준다.
    lookup: bool = False
    buffer_size: int = Field(default=LINE_BUFFER_SIZE, ge=1)


class RecordResponse(BaseModel):
    # 파서의 Record 데이터클래스를 그대로 직렬화한다.
    key: str
    value: str

    model_config = ConfigDict(from_attributes=True)


class ParseResponse(BaseModel):
    # records는 입력 순서를 유지한다.
    records: List[RecordResponse]
    count: int
    lookup: Optional[Dict[str, str]] = None


class HealthResponse(BaseModel):
    status: str
