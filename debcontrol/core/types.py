"""이 파일은 .py 타입 정의 모듈로 레코드와 레코드 시퀀스 모델을 제공합니다."""

from dataclasses import asdict, dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Record:
    # 컨트롤 파일에서 읽은 키/값 한 쌍이다. 키는 중복될 수 있다.
    key: str
    value: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


# 입력 순서를 그대로 보존하는 불변 레코드 시퀀스이다.
RecordSequence = Tuple[Record, ...]
