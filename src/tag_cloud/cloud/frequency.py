from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import AbstractSet, Iterable

import pyarrow as pa
import pyarrow.parquet as pq

from tag_cloud.cloud.tokenizer import is_separator_token, iter_tokens
from tag_cloud.utils.logging_config import get_logger

logger = get_logger(__name__)


def count_line(line: str, separators: AbstractSet[str], counter: Counter[str]) -> int:
    """한 줄의 단어를 소문자로 집계하고 집계한 단어 수를 반환한다."""
    added = 0
    for token in iter_tokens(line.rstrip("\r\n").lower(), separators):
        if is_separator_token(token, separators):
            continue
        counter[token] += 1
        added += 1
    return added


def build_word_count(lines: Iterable[str], separators: AbstractSet[str]) -> Counter[str]:
    """줄 단위로 토큰화하여 단어 빈도를 집계한다.

    줄 사이의 단어는 병합하지 않는다. 구분자 구간은 집계하지 않는다.

    Args:
        lines: 입력 텍스트 줄
        separators: 구분자 집합

    Returns:
        소문자 단어 → 출현 횟수
    """
    counter: Counter[str] = Counter()
    for line_no, line in enumerate(lines, 1):
        added = count_line(line, separators, counter)
        logger.debug("%d번째 줄: 단어 %d개", line_no, added)
    return counter


def write_frequency_parquet(word_count: Counter[str], output_path: Path) -> None:
    """단어 빈도를 parquet로 저장한다."""
    rows = sorted(word_count.items(), key=lambda item: (-item[1], item[0]))
    words = [word for word, _ in rows]
    counts = [count for _, count in rows]
    table = pa.Table.from_pydict(
        {"word": pa.array(words, type=pa.string()), "count": pa.array(counts, type=pa.int64())}
    )
    pq.write_table(table, output_path)
    logger.debug("단어 빈도 %d개 기록: %s", len(rows), output_path)
