"""이 파일은 .py 공통 예외 모듈로 컨트롤 파일 파싱 오류 유형을 표준화합니다."""


class ControlParseError(ValueError):
    """입력을 컨트롤 파일로 해석할 수 없을 때 사용하는 기본 예외입니다."""


class LineTooLongError(ControlParseError):
    """한 줄이 내부 라인 버퍼 크기를 넘을 때 사용합니다."""

    def __init__(self, limit: int, line_number: int):
        super().__init__(f"line {line_number} exceeds internal buffer limit of {limit} bytes")
        self.limit = limit
        self.line_number = line_number


class MalformedKeyError(ControlParseError):
    """키 영역에 주석 문자 '#'가 나타났을 때 사용합니다."""

    def __init__(self, line_number: int, column: int):
        super().__init__(
            f"malformed input file: comment '#' in key section (line {line_number}, column {column})"
        )
        self.line_number = line_number
        self.column = column


class ControlReadError(ControlParseError):
    """스트림 읽기 중 발생한 I/O 오류를 감싸는 예외입니다."""
