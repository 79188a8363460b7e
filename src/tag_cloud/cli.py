"""태그 클라우드 CLI 진입점 모듈.

텍스트 파일로부터 HTML 태그 클라우드를 생성하는 명령줄 인터페이스를 제공한다.
Rich 기반 콘솔 출력 및 로깅을 지원한다.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path
from time import perf_counter
from typing import Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tag_cloud.commands import Command, CountCommand, GenerateCommand
from tag_cloud.errors import InputNotFoundError, InvalidWordCountError, OutputWriteError
from tag_cloud.parser import setup_parser
from tag_cloud.utils.logging_config import get_console, get_logger, setup_logging

LOGGER_NAME = "tag_cloud.cli"
CONSOLE = get_console()

# 서브커맨드 이름 → 커맨드 클래스
_COMMAND_REGISTRY: dict[str, type[Command]] = {
    "generate": GenerateCommand,
    "count": CountCommand,
}


@lru_cache(maxsize=1)
def _get_banner() -> str:
    """배너 텍스트를 캐싱하여 반환한다.

    pyfiglet을 사용하여 ASCII 아트 배너를 생성하고, LRU 캐시로 재사용한다.

    Returns:
        생성된 배너 텍스트
    """
    from pyfiglet import Figlet
    return Figlet(font="standard").renderText("Tag Cloud").rstrip()


def print_banner() -> None:
    """시작 배너를 출력한다."""
    CONSOLE.print(Text(_get_banner(), style="bold cyan"))


def create_command(args: argparse.Namespace) -> Command:
    """커맨드 객체를 생성한다.

    Args:
        args: 파싱된 커맨드라인 인자

    Returns:
        생성된 Command 객체

    Raises:
        NotImplementedError: 유효하지 않은 커맨드인 경우
    """
    if cmd_cls := _COMMAND_REGISTRY.get(args.command):
        return cmd_cls.from_args(CONSOLE, args)
    raise NotImplementedError(f"'{args.command}'는 유효하지 않은 커맨드입니다.")


def format_time(elapsed: float) -> str:
    """경과 시간을 사람이 읽기 쉬운 형태로 포맷팅한다.

    1초 미만은 밀리초, 1분 미만은 초, 그 이상은 분:초 형식으로 표시한다.

    Args:
        elapsed: 경과 시간 (초 단위)

    Returns:
        포맷팅된 시간 문자열 (예: "500ms", "3.14초", "2분 30.5초")
    """
    if elapsed < 1:
        return f"{elapsed*1000:.0f}ms"
    if elapsed < 60:
        return f"{elapsed:.2f}초"
    minutes, seconds = divmod(elapsed, 60)
    return f"{int(minutes)}분 {seconds:.1f}초"


def format_value(value: Any) -> str:
    """결과 값을 포맷팅한다.

    타입별로 적절한 포맷터를 적용하고, 120자를 초과하면 잘라낸다.
    """
    formatters = {
        dict: lambda v: f"dict({len(v)})",
        list: lambda v: f"list({len(v)})",
    }
    if isinstance(value, Path):
        formatted = str(value)
    else:
        formatted = formatters.get(type(value), str)(value)
    return formatted[:117] + "..." if len(formatted) > 120 else formatted


def create_result_table(command_name: str, elapsed: float, result: dict[str, Any]) -> Panel:
    """실행 결과 테이블을 생성한다.

    Args:
        command_name: 커맨드 이름
        elapsed: 경과 시간 (초 단위)
        result: 실행 결과 딕셔너리

    Returns:
        생성된 Rich Panel 객체
    """
    table = Table(show_header=True, border_style="dim", padding=(0, 1))
    table.add_column("항목", style="bold cyan", width=25)
    table.add_column("값", style="yellow", justify="left")

    table.add_row("⏱️  실행 시간", format_time(elapsed))

    for key, value in result.items():
        formatted_key = key.replace("_", " ").title()
        table.add_row(f"   {formatted_key}", format_value(value))

    return Panel(
        table,
        title=f"[bold green]✅ {command_name} 완료[/bold green]",
        border_style="green",
        padding=(1, 2),
    )


# 오류 타입별 (카테고리, 아이콘, 로그 메시지)
_ERROR_CATEGORIES: dict[type[Exception], tuple[str, str, str]] = {
    InputNotFoundError: ("입력 파일 오류", "📁", "입력 파일을 열 수 없음"),
    InvalidWordCountError: ("단어 수 오류", "🔢", "단어 수가 올바르지 않음"),
    OutputWriteError: ("출력 파일 오류", "💾", "출력 파일을 쓸 수 없음"),
    NotImplementedError: ("미구현 기능", "⚠️", "미구현/미지원 오류"),
    FileNotFoundError: ("파일 없음", "📁", "파일 찾기 실패"),
    ValueError: ("입력값 오류", "⚠️", "입력값 오류"),
}


def categorize_error(error: Exception) -> tuple[str, str, str] | None:
    """예외 타입의 MRO를 따라 가장 구체적인 오류 카테고리를 찾는다."""
    for klass in type(error).__mro__:
        if klass in _ERROR_CATEGORIES:
            return _ERROR_CATEGORIES[klass]
    return None


def handle_error(error: Exception, command: str, elapsed: float, logger: logging.Logger) -> None:
    """에러를 처리하고 출력한다.

    Args:
        error: 발생한 예외
        command: 실행 중이던 커맨드 이름
        elapsed: 경과 시간 (초 단위)
        logger: 로거 객체
    """
    category_info = categorize_error(error)
    if category_info is None:
        category, icon = "예기치 않은 오류", "❌"
        logger.exception("[%s] 실행 중 예기치 않은 오류 발생", command)
    else:
        category, icon, log_msg = category_info
        logger.error("[%s] %s: %s", command, log_msg, error)

    error_table = Table(show_header=False, border_style="dim red", padding=(0, 1))
    error_table.add_column("항목", style="bold red", width=15)
    error_table.add_column("내용", style="white")

    error_table.add_row("카테고리", f"{icon} {category}")
    error_table.add_row("오류 타입", type(error).__name__)
    error_table.add_row("메시지", Text(str(error)))
    error_table.add_row("경과 시간", format_time(elapsed))

    CONSOLE.print()
    CONSOLE.print(
        Panel(error_table, title=f"[bold red]❌ {command} 실행 실패[/bold red]", border_style="red", padding=(1, 2))
    )
    CONSOLE.print()

    help_text = Text()
    help_text.append("💡 도움말: ", style="bold yellow")
    help_text.append(f"tag-cloud {command} --help", style="cyan")
    help_text.append(" 명령으로 상세 옵션을 확인하세요", style="dim")
    CONSOLE.print(help_text)
    CONSOLE.print()


def main(argv: Sequence[str] | None = None) -> int:
    """CLI 엔트리 포인트.

    서브커맨드를 파싱하고 실행한다. Rich 기반 콘솔 출력과 선택적 파일 로깅을 지원한다.

    Args:
        argv: 커맨드라인 인자 (None이면 sys.argv 사용)

    Returns:
        종료 코드 (0: 성공, 1: 오류, 2: 인자 오류, 130: 사용자 중단)
    """
    parser = setup_parser(CONSOLE, _COMMAND_REGISTRY.values())
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 2

    if not args.no_banner:
        print_banner()

    log_file = setup_logging(getattr(logging, args.log_level), log_to_file=args.log_file)
    logger = get_logger(LOGGER_NAME)
    start = perf_counter()

    try:
        command = create_command(args)
        command_name = command.get_name()
        logger.info("[%s] 단계 시작", command_name)
        result = command.execute()
        if log_file is not None:
            result["log_file"] = log_file
        elapsed = perf_counter() - start

        logger.info("[%s] 단계 완료 (%.2fs)", command_name, elapsed)
        CONSOLE.print(create_result_table(command_name, elapsed, result))
        return 0

    except KeyboardInterrupt:
        logger.warning("사용자 요청으로 실행 중단됨")
        return 130

    except Exception as e:
        handle_error(e, args.command, perf_counter() - start, logger)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
