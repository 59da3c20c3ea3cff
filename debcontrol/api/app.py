"""이 파일은 .py FastAPI 앱 모듈로 컨트롤 파일 파싱 엔드포인트를 제공합니다."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from debcontrol.core.config import API_PREFIX
from debcontrol.core.errors import ControlParseError
from debcontrol.core.lookup import to_lookup
from debcontrol.core.parser import parse_text

from .schemas import HealthResponse, ParseRequest, ParseResponse, RecordResponse

logger = logging.getLogger(__name__)

app = FastAPI(title="debcontrol")


@app.get(f"{API_PREFIX}/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok")


@app.post(f"{API_PREFIX}/parse", response_model=ParseResponse)
def parse_control(payload: ParseRequest) -> ParseResponse:
    try:
        records = parse_text(payload.content, buffer_size=payload.buffer_size)
    except ControlParseError as exc:
        # 형식 오류는 클라이언트 입력 문제이므로 400으로 돌려준다.
        logger.warning("Rejected control content: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return ParseResponse(
        records=[RecordResponse.model_validate(record) for record in records],
        count=len(records),
        lookup=to_lookup(records) if payload.lookup else None,
    )
