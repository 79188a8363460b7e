"""빈도 → 폰트 크기 선형 보간 모듈."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from tag_cloud.cloud.selection import RankedEntry
from tag_cloud.constants import FONT_MAX, FONT_MIN


@dataclass(frozen=True, slots=True)
class CloudEntry:
    """렌더링 대상 단어 항목."""

    word: str
    count: int
    font_size: int


def font_size_for(count: int, t_min: int, t_max: int, font_min: int = FONT_MIN, font_max: int = FONT_MAX) -> int:
    """단일 빈도값의 폰트 크기를 계산한다.

    - count > t_min: (font_max - font_min) * (count - t_min) // (t_max - t_min) + font_min
    - t_min == t_max: 모든 항목이 같은 빈도이므로 font_max
    - 그 외(count == t_min): 0
    """
    if t_max == t_min:
        return font_max
    if count > t_min:
        return (font_max - font_min) * (count - t_min) // (t_max - t_min) + font_min
    return 0


def compute_font_sizes(
    entries: Sequence[RankedEntry],
    font_min: int = FONT_MIN,
    font_max: int = FONT_MAX,
) -> list[CloudEntry]:
    """선정된 항목들의 폰트 크기를 계산한다.

    최소/최대 빈도는 코퍼스 전체가 아니라 선정된 항목들 안에서 구한다.
    입력 순서를 그대로 유지한다.

    Args:
        entries: 선정된 항목
        font_min: 최소 폰트 크기
        font_max: 최대 폰트 크기

    Returns:
        폰트 크기가 붙은 항목 리스트

    Raises:
        ValueError: font_min이 font_max보다 큰 경우
    """
    if font_min > font_max:
        raise ValueError(f"font_min({font_min})이 font_max({font_max})보다 큽니다.")
    if not entries:
        return []

    counts = [entry.count for entry in entries]
    t_min, t_max = min(counts), max(counts)

    return [
        CloudEntry(entry.word, entry.count, font_size_for(entry.count, t_min, t_max, font_min, font_max))
        for entry in entries
    ]
