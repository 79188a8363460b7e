"""태그 클라우드 실행 오류 정의.

실행 단위로 복구 불가능한 오류들이다. 커맨드에서 발생시키고
CLI 진입점에서 한 번에 보고한 뒤 종료한다.
내장 예외를 함께 상속하므로 ``FileNotFoundError`` 등으로도 잡을 수 있다.
"""

from __future__ import annotations

from pathlib import Path


class TagCloudError(Exception):
    """태그 클라우드 오류 기반 클래스."""


class InputNotFoundError(TagCloudError, FileNotFoundError):
    """입력 파일을 읽기 위해 열 수 없는 경우."""

    def __init__(self, path: Path, reason: str = "파일을 찾을 수 없습니다") -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


class InvalidWordCountError(TagCloudError, ValueError):
    """단어 개수 N이 양의 정수가 아닌 경우."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"단어 개수는 1 이상의 정수여야 합니다: {value!r}")


class OutputWriteError(TagCloudError, OSError):
    """출력 파일을 쓰기 위해 열 수 없는 경우."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"
