"""태그 클라우드 생성 커맨드.

입력 텍스트 파일의 단어 빈도를 집계하여 상위 N개 단어를
폰트 크기가 빈도에 비례하는 HTML 태그 클라우드로 저장한다.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.prompt import IntPrompt
from rich.table import Table
from rich.text import Text

from tag_cloud.cloud.font_size import CloudEntry
from tag_cloud.cloud.frequency import write_frequency_parquet
from tag_cloud.cloud.pipeline import build_cloud
from tag_cloud.config import TagCloudConfig
from tag_cloud.constants import DEFAULT_ENCODING, DEFAULT_NUM_WORDS, DEFAULT_SEPARATORS
from tag_cloud.errors import OutputWriteError
from tag_cloud.io import StagedOutputs, read_lines, write_staged_text
from tag_cloud.parser import CliHelpFormatter, separators_arg, word_count_arg
from tag_cloud.render.html import render_html
from tag_cloud.utils.logging_config import create_progress, get_logger

from .base import Command, SubparsersLike

logger = get_logger(__name__)


def resolve_num_words(console: Console, num_words: int | None) -> int:
    """단어 개수를 결정한다.

    인자로 주어지지 않았고 대화형 터미널이면 사용자에게 묻고,
    아니면 DEFAULT_NUM_WORDS를 사용한다.
    """
    if num_words is not None:
        return num_words
    if sys.stdin.isatty():
        return IntPrompt.ask(
            "태그 클라우드에 포함할 단어 수를 입력하세요",
            console=console,
            default=DEFAULT_NUM_WORDS,
        )
    logger.info("단어 수가 지정되지 않아 기본값 %d개를 사용합니다.", DEFAULT_NUM_WORDS)
    return DEFAULT_NUM_WORDS


class GenerateCommand(Command):
    """태그 클라우드 생성 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        config: 태그 클라우드 생성 설정
    """

    @staticmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        """서브커맨드 파서를 설정한다.

        Args:
            subparsers: 서브파서 액션 객체
        """
        parser = subparsers.add_parser("generate", help="HTML 태그 클라우드 생성", formatter_class=CliHelpFormatter)
        parser.add_argument("input", type=Path, help="입력 텍스트 파일")
        parser.add_argument("output", type=Path, help="출력 HTML 파일")
        parser.add_argument(
            "-n",
            "--num-words",
            type=word_count_arg,
            default=None,
            help=f"태그 클라우드 단어 수 (생략 시 대화형으로 입력, 비대화형이면 {DEFAULT_NUM_WORDS})",
        )
        parser.add_argument(
            "--separators", type=separators_arg, default=DEFAULT_SEPARATORS, help="구분자 문자 목록 (\\t = 탭)"
        )
        parser.add_argument("--encoding", default=DEFAULT_ENCODING, help="입력 파일 인코딩")
        parser.add_argument(
            "--output-frequency", type=Path, default=None, help="전체 단어 빈도 parquet 저장 경로 (선택)"
        )
        parser.add_argument("--no-progress", action="store_true", help="진행바를 표시하지 않음")

    @classmethod
    def from_args(cls, console: Console, args: argparse.Namespace) -> GenerateCommand:
        config = TagCloudConfig(
            input_path=args.input,
            output_path=args.output,
            num_words=resolve_num_words(console, args.num_words),
            separators=args.separators,
            encoding=args.encoding,
            frequency_path=args.output_frequency,
            show_progress=not args.no_progress,
        )
        return cls(console, config)

    def __init__(self, console: Console, config: TagCloudConfig):
        self.console = console
        self.config = config

    def execute(self) -> dict[str, Any]:
        """태그 클라우드를 생성한다.

        입력 파일을 읽어 단어 빈도를 집계하고, 상위 N개 단어로 HTML을 만들어 저장한다.
        출력 파일은 모든 계산과 기록이 끝난 뒤 한 번에 교체하므로 실패 시 남지 않는다.

        Returns:
            실행 결과 딕셔너리 (output_path, total_words, unique_words, selected_words)
        """
        config = self.config
        config.validate()

        lines = read_lines(config.input_path, config.encoding)

        with create_progress(transient=True, disable=not config.show_progress) as progress:
            tracked = progress.track(lines, total=len(lines), description="단어 집계")
            result = build_cloud(tracked, config.separator_set, config.num_words)

        html = render_html(result.entries, str(config.input_path), config.num_words)

        # HTML과 빈도 parquet가 모두 준비된 뒤에만 대상 경로로 교체한다
        with StagedOutputs() as outputs:
            write_staged_text(outputs, config.output_path, html)
            if config.frequency_path is not None:
                frequency_tmp = outputs.stage(config.frequency_path)
                try:
                    write_frequency_parquet(result.word_count, frequency_tmp)
                except OSError as exc:
                    raise OutputWriteError(config.frequency_path, str(exc)) from exc
            outputs.commit()

        self._print_entries(result.entries)

        summary: dict[str, Any] = {
            "output_path": config.output_path,
            "total_words": result.total_words,
            "unique_words": result.unique_words,
            "selected_words": len(result.entries),
        }
        if config.frequency_path is not None:
            summary["frequency_path"] = config.frequency_path
        return summary

    def _print_entries(self, entries: list[CloudEntry]) -> None:
        if not entries:
            self.console.print("[yellow]선정된 단어가 없습니다.[/yellow]")
            return

        table = Table(title="☁️  태그 클라우드 단어", show_header=True, title_style="bold green")
        table.add_column("단어", style="bold cyan")
        table.add_column("빈도", style="yellow", justify="right")
        table.add_column("폰트", style="magenta", justify="right")

        for entry in entries:
            table.add_row(Text(entry.word), f"{entry.count:,}회", f"f{entry.font_size}")

        self.console.print()
        self.console.print(table)
        self.console.print()

    def get_name(self) -> str:
        """커맨드 이름을 반환한다.

        Returns:
            커맨드 이름 "generate"
        """
        return "generate"
