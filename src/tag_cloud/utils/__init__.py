"""공용 유틸리티 모듈."""

from .logging_config import create_progress, get_console, get_logger, setup_logging

__all__ = [
    "create_progress",
    "get_console",
    "get_logger",
    "setup_logging",
]
