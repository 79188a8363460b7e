"""구분자 집합 기반 토크나이저.

한 줄의 텍스트를 구분자 문자의 연속 구간과 비구분자 문자의 연속 구간으로
빠짐없이 나눈다. 모든 토큰을 이어 붙이면 원래 줄이 그대로 복원된다.
"""

from __future__ import annotations

from typing import AbstractSet, Iterator


def build_separator_set(chars: str) -> frozenset[str]:
    """구분자 문자열로부터 구분자 집합을 만든다."""
    return frozenset(chars)


def next_word_or_separator(text: str, position: int, separators: AbstractSet[str]) -> str:
    """position에서 시작하는 가장 긴 동질 구간을 반환한다.

    position 위치 문자가 구분자이면 구분자가 이어지는 동안,
    아니면 비구분자가 이어지는 동안 구간을 늘린다. 줄 끝을 넘지 않는다.

    Args:
        text: 대상 문자열 (한 줄)
        position: 시작 위치 (0 <= position < len(text))
        separators: 구분자 집합

    Returns:
        단어 또는 구분자 토큰

    Raises:
        IndexError: position이 문자열 범위를 벗어난 경우
    """
    if not 0 <= position < len(text):
        raise IndexError(f"position {position}이(가) 범위를 벗어났습니다 (길이 {len(text)})")

    in_separator = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == in_separator:
        end += 1
    return text[position:end]


def iter_tokens(line: str, separators: AbstractSet[str]) -> Iterator[str]:
    """한 줄을 단어/구분자 토큰 순서대로 생성한다."""
    position = 0
    while position < len(line):
        token = next_word_or_separator(line, position, separators)
        yield token
        position += len(token)


def is_separator_token(token: str, separators: AbstractSet[str]) -> bool:
    """토큰이 구분자 구간인지 확인한다.

    토큰은 동질 구간이므로 첫 문자만 확인하면 충분하다.
    """
    return bool(token) and token[0] in separators
