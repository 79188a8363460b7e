"""CLI 커맨드 추상 인터페이스.

각 서브커맨드를 실행하는 커맨드 클래스들의 공통 인터페이스를 정의한다.
모든 커맨드는 Command 추상 클래스를 상속받아 configure_parser(), from_args(),
execute(), get_name()을 구현해야 한다.
"""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from typing import Any, Protocol

from rich.console import Console


class SubparsersLike(Protocol):
    """argparse 서브파서 액션 호환 프로토콜."""

    def add_parser(self, name: str, **kwargs: Any) -> argparse.ArgumentParser:
        """서브커맨드 파서를 추가한다."""
        ...


class Command(ABC):
    """CLI 서브커맨드 실행 인터페이스."""

    @staticmethod
    @abstractmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        """서브커맨드 파서를 설정한다.

        Args:
            subparsers: 서브파서 액션 객체
        """
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def from_args(cls, console: Console, args: argparse.Namespace) -> Command:
        """파싱된 인자로부터 커맨드를 생성한다.

        Args:
            console: Rich 콘솔 인스턴스
            args: 파싱된 커맨드라인 인자
        """
        raise NotImplementedError

    @abstractmethod
    def execute(self) -> dict[str, Any]:
        """커맨드 실행 로직.

        Returns:
            실행 결과 딕셔너리 (결과 패널 출력용)
        """
        raise NotImplementedError

    @abstractmethod
    def get_name(self) -> str:
        """커맨드 이름을 반환한다."""
        raise NotImplementedError
