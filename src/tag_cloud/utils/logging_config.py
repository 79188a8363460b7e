"""중앙화된 로깅/진행바 설정"""

import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

from tag_cloud.constants import LOGS_DIR

_CONSOLE = Console(stderr=False)


def get_console() -> Console:
    """로깅과 진행바에서 공용으로 사용할 Rich 콘솔을 반환한다."""
    return _CONSOLE


def create_progress(*, transient: bool = False, disable: bool = False) -> Progress:
    """줄 단위 처리 작업용 Rich 진행바를 생성한다."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=get_console(),
        transient=transient,
        disable=disable,
    )


_FILE_HANDLER: logging.FileHandler | None = None


def setup_logging(
    level: int = logging.INFO,
    format_string: str = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
    log_to_file: bool = False,
) -> Path | None:
    """전역 로깅을 설정한다.

    여러 번 호출해도 Rich 콘솔 핸들러와 파일 핸들러는 각각 하나만 등록된다.

    Args:
        level: 로깅 레벨
        format_string: 로그 파일 포맷 문자열
        log_to_file: LOGS_DIR 아래 파일로 로그를 저장할지 여부

    Returns:
        로그 파일 경로 (파일 로깅을 하지 않으면 None)
    """
    global _FILE_HANDLER

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Rich 콘솔 핸들러 설정
    if not any(isinstance(handler, RichHandler) for handler in root_logger.handlers):
        console_handler = RichHandler(
            console=get_console(),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
            log_time_format="%Y-%m-%d %H:%M:%S",
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    if not log_to_file:
        return None

    if _FILE_HANDLER is not None:
        return Path(_FILE_HANDLER.baseFilename)

    # 파일 핸들러 설정
    LOGS_DIR.mkdir(parents=True, exist_ok=True)
    log_file = LOGS_DIR / f"tag_cloud_{datetime.now():%Y%m%d_%H%M%S}.log"

    _FILE_HANDLER = logging.FileHandler(log_file, encoding="utf-8")
    _FILE_HANDLER.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(_FILE_HANDLER)

    root_logger.info("📝 로그 파일: %s", log_file)
    return log_file


def get_logger(name: str) -> logging.Logger:
    """모듈별 로거를 반환한다.

    Args:
        name: 로거 이름 (보통 __name__ 사용)

    Returns:
        설정된 로거 인스턴스
    """
    return logging.getLogger(name)
