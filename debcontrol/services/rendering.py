"""이 파일은 .py 렌더링 모듈로 파싱 결과를 JSON/YAML/텍스트로 출력합니다."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Union

import yaml

from debcontrol.core.lookup import to_lookup
from debcontrol.core.types import RecordSequence

SUPPORTED_FORMATS = {"json", "yaml", "text"}

Payload = Union[List[Dict[str, str]], Dict[str, str]]


def render_records(records: RecordSequence, output_format: str, *, lookup: bool = False) -> str:
    # 지원 여부를 확인하고 형식을 정규화한다.
    normalized = _normalize_format(output_format)
    if normalized == "text":
        return _render_text(records, lookup)
    return _dump(_build_payload(records, lookup), normalized)


def render_files(
    results: Mapping[str, RecordSequence],
    output_format: str,
    *,
    lookup: bool = False,
) -> str:
    # 여러 파일의 결과를 경로별로 묶어 하나의 문서로 만든다.
    normalized = _normalize_format(output_format)
    if normalized == "text":
        sections = [
            f"==> {path} <==\n{_render_text(records, lookup)}" for path, records in results.items()
        ]
        return "\n\n".join(sections)
    payload = {path: _build_payload(records, lookup) for path, records in results.items()}
    return _dump(payload, normalized)


def _normalize_format(output_format: str) -> str:
    normalized = output_format.strip().lower()
    if normalized not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported format: {output_format}")
    return normalized


def _build_payload(records: RecordSequence, lookup: bool) -> Payload:
    if lookup:
        return to_lookup(records)
    return [record.to_dict() for record in records]


def _dump(payload: Any, normalized: str) -> str:
    if normalized == "json":
        return json.dumps(payload, ensure_ascii=False, indent=2)
    # sort_keys=False로 입력 순서를 유지한다.
    return yaml.safe_dump(payload, allow_unicode=True, sort_keys=False, default_flow_style=False).rstrip("\n")


def _render_text(records: RecordSequence, lookup: bool) -> str:
    pairs = to_lookup(records).items() if lookup else [(r.key, r.value) for r in records]
    lines: List[str] = []
    for key, value in pairs:
        first, *rest = value.split("\n")
        lines.append(f"{key}: {first}" if key else first)
        # 여러 줄 값은 연속 줄처럼 공백 한 칸을 붙여 출력한다.
        lines.extend(f" {line}" for line in rest)
    return "\n".join(lines)
