"""태그 클라우드 실행 설정.

대화형 입력 대신 명시적인 설정 객체를 파이프라인에 전달한다.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tag_cloud.cloud.tokenizer import build_separator_set
from tag_cloud.constants import DEFAULT_ENCODING, DEFAULT_SEPARATORS
from tag_cloud.errors import InvalidWordCountError


def parse_word_count(value: str) -> int:
    """단어 개수 문자열을 양의 정수로 변환한다.

    Raises:
        InvalidWordCountError: 숫자가 아니거나 1 미만인 경우
    """
    try:
        parsed = int(value.strip())
    except (AttributeError, ValueError) as e:
        raise InvalidWordCountError(value) from e
    if parsed < 1:
        raise InvalidWordCountError(value)
    return parsed


@dataclass(frozen=True)
class TagCloudConfig:
    """태그 클라우드 생성 설정.

    Attributes:
        input_path: 입력 텍스트 파일 경로
        output_path: 출력 HTML 파일 경로
        num_words: 태그 클라우드에 포함할 단어 수
        separators: 구분자 문자열
        encoding: 입력 파일 인코딩
        frequency_path: 전체 단어 빈도 parquet 저장 경로 (None이면 저장하지 않음)
        show_progress: 진행바 표시 여부
    """

    input_path: Path
    output_path: Path
    num_words: int
    separators: str = DEFAULT_SEPARATORS
    encoding: str = DEFAULT_ENCODING
    frequency_path: Path | None = None
    show_progress: bool = True

    def validate(self) -> None:
        """설정값을 검증한다.

        Raises:
            InvalidWordCountError: num_words가 양의 정수가 아닌 경우
            ValueError: 구분자 문자열이 비어 있는 경우
        """
        if isinstance(self.num_words, bool) or not isinstance(self.num_words, int) or self.num_words < 1:
            raise InvalidWordCountError(self.num_words)
        if not self.separators:
            raise ValueError("구분자 문자열이 비어 있습니다.")

    @property
    def separator_set(self) -> frozenset[str]:
        return build_separator_set(self.separators)
