"""상위 N개 단어 선정 모듈.

빈도 내림차순으로 상위 N개를 고른 뒤, 출력용으로 알파벳 순서로 재정렬한다.
동일 빈도는 단어 오름차순으로 결정적으로 정렬한다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True, slots=True)
class RankedEntry:
    """선정된 단어와 출현 횟수."""

    word: str
    count: int

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise ValueError(f"출현 횟수는 1 이상이어야 합니다: {self.word!r}={self.count}")


def _alphabetical_key(entry: RankedEntry) -> tuple[str, str]:
    return entry.word.casefold(), entry.word


def rank_by_count(word_count: Mapping[str, int]) -> list[RankedEntry]:
    """모든 단어를 빈도 내림차순(동률은 단어 오름차순)으로 정렬한다."""
    entries = [RankedEntry(word, count) for word, count in word_count.items()]
    return sorted(entries, key=lambda entry: (-entry.count, *_alphabetical_key(entry)))


def select_top_n(word_count: Mapping[str, int], n: int) -> list[RankedEntry]:
    """빈도 상위 n개 단어를 알파벳 순서로 반환한다.

    Args:
        word_count: 단어 → 출현 횟수
        n: 선정할 단어 수 (0 이하이면 빈 결과)

    Returns:
        알파벳 순서(대소문자 무시)로 정렬된 최대 n개의 항목
    """
    if n <= 0:
        return []
    top = rank_by_count(word_count)[:n]
    return sorted(top, key=_alphabetical_key)
