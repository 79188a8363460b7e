"""토큰화 → 빈도 집계 → 상위 N 선정 → 폰트 크기 계산 파이프라인.

입출력이 없는 순수 함수로 구성되어 독립적으로 테스트할 수 있다.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import AbstractSet, Iterable

from tag_cloud.cloud.font_size import CloudEntry, compute_font_sizes
from tag_cloud.cloud.frequency import build_word_count
from tag_cloud.cloud.selection import select_top_n
from tag_cloud.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CloudResult:
    """파이프라인 실행 결과."""

    word_count: Counter[str]
    entries: list[CloudEntry] = field(default_factory=list)

    @property
    def total_words(self) -> int:
        return sum(self.word_count.values())

    @property
    def unique_words(self) -> int:
        return len(self.word_count)


def build_cloud(lines: Iterable[str], separators: AbstractSet[str], num_words: int) -> CloudResult:
    """입력 줄로부터 태그 클라우드 항목을 만든다."""
    word_count = build_word_count(lines, separators)
    logger.info("🔤 단어 집계 완료: 총 %d개, 고유 %d개", sum(word_count.values()), len(word_count))

    selected = select_top_n(word_count, num_words)
    entries = compute_font_sizes(selected)
    logger.info("☁️  상위 %d개 단어 선정 (요청 %d개)", len(entries), num_words)

    return CloudResult(word_count=word_count, entries=entries)
