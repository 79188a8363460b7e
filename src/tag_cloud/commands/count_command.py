"""단어 빈도 분석 커맨드.

입력 텍스트 파일의 단어 빈도만 집계하여 상위 단어를 출력하고,
선택적으로 전체 빈도를 parquet로 저장한다.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from tag_cloud.cloud.frequency import build_word_count, write_frequency_parquet
from tag_cloud.cloud.selection import rank_by_count
from tag_cloud.cloud.tokenizer import build_separator_set
from tag_cloud.constants import DEFAULT_ENCODING, DEFAULT_SEPARATORS, DEFAULT_TOP_K
from tag_cloud.errors import OutputWriteError
from tag_cloud.io import StagedOutputs, read_lines
from tag_cloud.parser import CliHelpFormatter, positive_int, separators_arg
from tag_cloud.utils.logging_config import create_progress

from .base import Command, SubparsersLike


class CountCommand(Command):
    """단어 빈도 분석 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        input_path: 입력 텍스트 파일
        top: 출력할 상위 단어 수
        separators: 구분자 문자열
        encoding: 입력 파일 인코딩
        frequency_path: 전체 단어 빈도 parquet 저장 경로 (None이면 저장하지 않음)
    """

    @staticmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        """서브커맨드 파서를 설정한다.

        Args:
            subparsers: 서브파서 액션 객체
        """
        parser = subparsers.add_parser("count", help="단어 빈도 분석", formatter_class=CliHelpFormatter)
        parser.add_argument("input", type=Path, help="입력 텍스트 파일")
        parser.add_argument("--top", type=positive_int, default=DEFAULT_TOP_K, help="출력할 상위 단어 수")
        parser.add_argument(
            "--separators", type=separators_arg, default=DEFAULT_SEPARATORS, help="구분자 문자 목록 (\\t = 탭)"
        )
        parser.add_argument("--encoding", default=DEFAULT_ENCODING, help="입력 파일 인코딩")
        parser.add_argument(
            "--output-frequency", type=Path, default=None, help="전체 단어 빈도 parquet 저장 경로 (선택)"
        )

    @classmethod
    def from_args(cls, console: Console, args: argparse.Namespace) -> CountCommand:
        return cls(console, args.input, args.top, args.separators, args.encoding, args.output_frequency)

    def __init__(
        self,
        console: Console,
        input_path: Path,
        top: int,
        separators: str = DEFAULT_SEPARATORS,
        encoding: str = DEFAULT_ENCODING,
        frequency_path: Path | None = None,
    ):
        self.console = console
        self.input_path = input_path
        self.top = top
        self.separators = separators
        self.encoding = encoding
        self.frequency_path = frequency_path

    def execute(self) -> dict[str, Any]:
        """단어 빈도를 집계하고 상위 단어를 출력한다.

        Returns:
            분석 결과 딕셔너리 (total_words, unique_words, top_words)
        """
        lines = read_lines(self.input_path, self.encoding)

        with create_progress(transient=True) as progress:
            tracked = progress.track(lines, total=len(lines), description="단어 집계")
            counter = build_word_count(tracked, build_separator_set(self.separators))

        if self.frequency_path is not None:
            with StagedOutputs() as outputs:
                frequency_tmp = outputs.stage(self.frequency_path)
                try:
                    write_frequency_parquet(counter, frequency_tmp)
                except OSError as exc:
                    raise OutputWriteError(self.frequency_path, str(exc)) from exc
                outputs.commit()

        total_words = sum(counter.values())
        unique_words = len(counter)
        ranked = rank_by_count(counter)[: self.top]

        table = Table(title="✨ 단어 빈도 분석 결과", show_header=True, title_style="bold green")
        table.add_column("항목", style="bold cyan", width=20)
        table.add_column("값", style="yellow", justify="right")
        table.add_row("총 단어 수", f"{total_words:,}개")
        table.add_row("고유 단어 수", f"{unique_words:,}개")
        table.add_row("평균 빈도", f"{total_words / unique_words if unique_words else 0:.2f}회")

        self.console.print()
        self.console.print(table)

        if ranked:
            top_table = Table(title=f"🏆 상위 {len(ranked)}개 빈도 단어", show_header=True, border_style="dim")
            top_table.add_column("순위", style="dim", width=6, justify="center")
            top_table.add_column("단어", style="cyan")
            top_table.add_column("빈도", style="yellow", width=15, justify="right")

            for idx, entry in enumerate(ranked, 1):
                rank_style = "bold green" if idx <= 3 else "dim"
                top_table.add_row(f"{idx}", Text(entry.word), f"{entry.count:,}회", style=rank_style)

            self.console.print()
            self.console.print(top_table)

        self.console.print()

        result: dict[str, Any] = {
            "total_words": total_words,
            "unique_words": unique_words,
            "top_words": [(entry.word, entry.count) for entry in ranked],
        }
        if self.frequency_path is not None:
            result["frequency_path"] = self.frequency_path
        return result

    def get_name(self) -> str:
        """커맨드 이름을 반환한다.

        Returns:
            커맨드 이름 "count"
        """
        return "count"
