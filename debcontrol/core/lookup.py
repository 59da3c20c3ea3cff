"""이 파일은 .py 조회 모듈로 레코드 시퀀스를 키→값 매핑으로 접습니다."""

from typing import Dict, Iterable

from .types import Record


def to_lookup(records: Iterable[Record]) -> Dict[str, str]:
    # 순서 정보는 버리고, 같은 키가 여러 번 나오면 마지막 값이 남는다.
    lookup: Dict[str, str] = {}
    for record in records:
        lookup[record.key] = record.value
    return lookup
