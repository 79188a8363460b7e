"""태그 클라우드 핵심 파이프라인 모듈.

텍스트를 토큰화하여 단어 빈도를 집계하고, 상위 N개 단어를 선정하여
빈도에 비례하는 폰트 크기를 계산한다.
"""

from __future__ import annotations

from .font_size import CloudEntry, compute_font_sizes
from .frequency import build_word_count, write_frequency_parquet
from .pipeline import CloudResult, build_cloud
from .selection import RankedEntry, rank_by_count, select_top_n
from .tokenizer import build_separator_set, is_separator_token, iter_tokens, next_word_or_separator

__all__ = [
    "CloudEntry",
    "CloudResult",
    "RankedEntry",
    "build_cloud",
    "build_separator_set",
    "build_word_count",
    "compute_font_sizes",
    "is_separator_token",
    "iter_tokens",
    "next_word_or_separator",
    "rank_by_count",
    "select_top_n",
    "write_frequency_parquet",
]
