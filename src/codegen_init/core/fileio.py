"""
파일 쓰기 유틸: 원자적 텍스트 쓰기 + 프로젝트 락.

규칙:
- 원자적 쓰기: temp → rename + fsync
- 중간 상태 없음: 중단되어도 반쯤 쓰인 .elm 파일이 남지 않음
- fsync 실패 시 경고 남기고 계속 진행 (best-effort 내구성)
- 락: filelock 기반, 같은 프로젝트에 대한 동시 초기화 방지
"""

import logging
import os
import stat
import tempfile
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock, Timeout

from codegen_init.domain.constants import LOCK_FILENAME, TEMPLATE_ENCODING
from codegen_init.domain.errors import ErrorCodes, ScaffoldError

logger = logging.getLogger(__name__)

# =============================================================================
# Lock Management
# =============================================================================


@contextmanager
def project_lock(
    project_root: Path, timeout: float
) -> Generator[Path, None, None]:
    """
    프로젝트 단위 락.

    사용법:
        with project_lock(project_root, timeout=10.0):
            # codegen/ 쓰기

    Args:
        project_root: 프로젝트 루트
        timeout: 락 대기 시간 (초)

    Yields:
        lock_path: 락 파일 경로

    Raises:
        ScaffoldError: SCAFFOLD_LOCK_TIMEOUT
    """
    project_root.mkdir(parents=True, exist_ok=True)
    lock_path = project_root / LOCK_FILENAME
    lock = FileLock(lock_path, timeout=timeout)

    try:
        lock.acquire()
    except Timeout:
        raise ScaffoldError(
            ErrorCodes.SCAFFOLD_LOCK_TIMEOUT,
            f"Failed to acquire lock for '{project_root}'",
            lock_path=str(lock_path),
            timeout=timeout,
        ) from None

    try:
        yield lock_path
    finally:
        lock.release()


# =============================================================================
# Atomic Write
# =============================================================================


def _file_mode(path: Path) -> int:
    """
    새로 쓸 파일의 권한.

    기존 파일이 있으면 그 권한 유지, 없으면 umask 기준 (0o666 & ~umask).
    NamedTemporaryFile은 항상 0o600으로 만들기 때문에 필요.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _fsync_dir(dir_path: Path) -> None:
    """
    디렉토리 fsync (가능한 환경에서).

    rename 후 디렉토리 엔트리까지 내구성을 강화하려면 필요.
    일부 OS/파일시스템에서는 지원되지 않을 수 있음.
    """
    try:
        dir_fd = os.open(str(dir_path), os.O_RDONLY | os.O_DIRECTORY)
        try:
            os.fsync(dir_fd)
        finally:
            os.close(dir_fd)
    except (OSError, AttributeError) as e:
        # O_DIRECTORY 미지원, 권한 문제 등
        logger.warning(
            f"Directory fsync failed for {dir_path}: {e}. "
            f"Rename durability may not be guaranteed."
        )


def atomic_write_text(path: Path, text: str) -> None:
    """
    원자적 텍스트 쓰기.

    동작:
    - 중간 상태 없음: temp → rename
    - 줄바꿈 변환 없음 (템플릿 그대로, `\\n`)
    - fsync 실패 시 경고 남기고 계속 진행
    - 실패 시 cleanup: temp 파일 삭제, 기존 파일 보존

    Args:
        path: 저장할 파일 경로
        text: 파일 내용

    Raises:
        ScaffoldError: WRITE_FAILED
    """
    dir_path = path.parent

    temp_path = None
    try:
        dir_path.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=dir_path,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding=TEMPLATE_ENCODING,
            newline="",
        ) as f:
            temp_path = Path(f.name)
            f.write(text)
            f.flush()
            try:
                os.fsync(f.fileno())
            except OSError as e:
                logger.warning(
                    f"File fsync failed for {path}: {e}. "
                    f"Data may not be durable on power loss."
                )

        try:
            os.chmod(temp_path, _file_mode(path))
        except OSError as e:
            logger.warning(f"Failed to set permissions on {path}: {e}")

        os.replace(temp_path, path)
        _fsync_dir(dir_path)

    except Exception as e:
        # 실패 시 temp 파일 정리
        if temp_path and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass
        if isinstance(e, OSError):
            raise ScaffoldError(
                ErrorCodes.WRITE_FAILED,
                f"Failed to write {path}: {e}",
                path=str(path),
            ) from e
        raise
