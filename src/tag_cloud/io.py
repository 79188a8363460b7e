"""입력 파일 읽기와 출력 파일 쓰기 헬퍼.

출력은 대상과 같은 디렉토리의 임시 파일에 먼저 기록하고, 모든 출력이 준비된 뒤에만
대상 경로로 교체한다. 실패 시 불완전한 출력 파일이나 임시 파일이 남지 않는다.
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from types import TracebackType

from tag_cloud.errors import InputNotFoundError, OutputWriteError
from tag_cloud.utils.logging_config import get_logger

logger = get_logger(__name__)


def read_lines(path: Path, encoding: str = "utf-8") -> list[str]:
    """입력 파일 전체를 줄 단위로 읽는다.

    Raises:
        InputNotFoundError: 파일이 없거나 읽을 수 없는 경우 (알 수 없는 인코딩 포함)
    """
    if not path.is_file():
        raise InputNotFoundError(path)
    try:
        with path.open("r", encoding=encoding) as handle:
            lines = handle.readlines()
    except UnicodeDecodeError as exc:
        raise InputNotFoundError(path, f"{encoding}로 디코딩할 수 없습니다 ({exc.reason})") from exc
    except LookupError as exc:
        raise InputNotFoundError(path, f"알 수 없는 인코딩입니다: {encoding}") from exc
    except OSError as exc:
        raise InputNotFoundError(path, exc.strerror or str(exc)) from exc

    logger.info("📂 입력 파일 %s에서 %d줄을 읽었습니다.", path, len(lines))
    return lines


def target_mode(path: Path) -> int:
    """출력 파일에 적용할 권한 비트를 구한다.

    대상이 이미 있으면 그 권한을 유지하고, 없으면 umask를 적용한 0o666을 사용한다.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class StagedOutputs:
    """여러 출력 파일을 임시 파일로 준비했다가 한 번에 교체하는 컨텍스트 매니저.

    ``stage()``로 받은 임시 경로에 내용을 쓰고, 모두 성공하면 ``commit()``을 호출한다.
    ``commit()`` 전에 블록을 벗어나면 임시 파일을 모두 제거한다.

    Example:
        with StagedOutputs() as outputs:
            html_tmp = outputs.stage(html_path)
            html_tmp.write_text(html, encoding="utf-8")
            outputs.commit()
    """

    def __init__(self) -> None:
        self._staged: list[tuple[Path, Path]] = []

    def __enter__(self) -> StagedOutputs:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.discard()

    def stage(self, path: Path) -> Path:
        """대상 경로와 같은 디렉토리에 빈 임시 파일을 만들고 그 경로를 반환한다.

        Raises:
            OutputWriteError: 대상이 디렉토리이거나 임시 파일을 만들 수 없는 경우
        """
        if path.is_dir():
            raise OutputWriteError(path, "디렉토리에는 쓸 수 없습니다")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
            os.close(fd)
        except OSError as exc:
            raise OutputWriteError(path, exc.strerror or str(exc)) from exc

        tmp_path = Path(tmp_name)
        self._staged.append((tmp_path, path))
        return tmp_path

    def commit(self) -> None:
        """준비된 임시 파일들에 대상 권한을 적용하고 대상 경로로 교체한다.

        Raises:
            OutputWriteError: 권한 설정 또는 교체에 실패한 경우
        """
        while self._staged:
            tmp_path, path = self._staged[0]
            try:
                os.chmod(tmp_path, target_mode(path))
                os.replace(tmp_path, path)
            except OSError as exc:
                raise OutputWriteError(path, exc.strerror or str(exc)) from exc
            self._staged.pop(0)
            logger.info("📄 출력 파일 저장: %s", path)

    def discard(self) -> None:
        """교체되지 않은 임시 파일을 제거한다."""
        for tmp_path, _ in self._staged:
            tmp_path.unlink(missing_ok=True)
        self._staged.clear()


def write_staged_text(outputs: StagedOutputs, path: Path, text: str, encoding: str = "utf-8") -> None:
    """텍스트를 path의 임시 파일에 기록한다.

    Raises:
        OutputWriteError: 인코딩 또는 쓰기에 실패한 경우
    """
    tmp_path = outputs.stage(path)
    try:
        with tmp_path.open("w", encoding=encoding) as handle:
            handle.write(text)
    except UnicodeEncodeError as exc:
        raise OutputWriteError(path, f"{encoding}로 인코딩할 수 없습니다 ({exc.reason})") from exc
    except OSError as exc:
        raise OutputWriteError(path, exc.strerror or str(exc)) from exc

