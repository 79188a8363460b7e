from __future__ import annotations

from collections import Counter
from pathlib import Path

import pyarrow.parquet as pq

from tag_cloud.cloud.frequency import build_word_count, count_line, write_frequency_parquet
from tag_cloud.cloud.tokenizer import build_separator_set, is_separator_token, iter_tokens

SEPARATORS = build_separator_set(" .,")
SAMPLE = "the cat sat on the mat. the cat ran."


def test_build_word_count_sample() -> None:
    counts = build_word_count([SAMPLE], SEPARATORS)
    assert counts == Counter({"the": 3, "cat": 2, "sat": 1, "on": 1, "mat": 1, "ran": 1})


def test_build_word_count_is_case_insensitive() -> None:
    counts = build_word_count(["The THE the", "tHe"], SEPARATORS)
    assert counts == Counter({"the": 4})


def test_words_are_not_merged_across_lines() -> None:
    counts = build_word_count(["hyphen\n", "ated\n"], SEPARATORS)
    assert counts == Counter({"hyphen": 1, "ated": 1})


def test_line_endings_are_not_counted() -> None:
    counts = build_word_count(["cat\r\n", "cat\n"], SEPARATORS)
    assert counts == Counter({"cat": 2})


def test_empty_input() -> None:
    assert build_word_count([], SEPARATORS) == Counter()
    assert build_word_count(["", "\n"], SEPARATORS) == Counter()


def test_count_line_returns_number_of_words() -> None:
    counter: Counter[str] = Counter()
    assert count_line("a b, a.", SEPARATORS, counter) == 3
    assert counter == Counter({"a": 2, "b": 1})


def test_sum_of_counts_equals_word_token_count() -> None:
    lines = [SAMPLE, "  Cat, dog.. ", "", "ran ran ran"]
    counts = build_word_count(lines, SEPARATORS)
    word_tokens = sum(
        1
        for line in lines
        for token in iter_tokens(line.lower(), SEPARATORS)
        if not is_separator_token(token, SEPARATORS)
    )
    assert sum(counts.values()) == word_tokens


def test_write_frequency_parquet(tmp_path: Path) -> None:
    output = tmp_path / "reports" / "word_frequency.parquet"
    write_frequency_parquet(Counter({"cat": 2, "the": 3, "ant": 2}), output)

    table = pq.read_table(output)
    assert table.column_names == ["word", "count"]
    assert table.column("word").to_pylist() == ["the", "ant", "cat"]
    assert table.column("count").to_pylist() == [3, 2, 2]
