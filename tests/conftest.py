"""
Pytest fixtures for the initializer tests.

구성:
- 빈 프로젝트 루트 (tmp_path 기반)
- 설정 파일 작성 헬퍼
"""

import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import yaml

from codegen_init.core.config import ScaffoldConfig

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """빈 Elm 프로젝트 루트."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def codegen_dir(project_root: Path) -> Path:
    """기본 codegen/ 경로 (생성하지 않음)."""
    return project_root / "codegen"


# =============================================================================
# Permission Fixtures
# =============================================================================

@pytest.fixture
def umask_022() -> Generator[int, None, None]:
    """umask 0o022 고정 (권한 테스트용), 종료 시 복원."""
    previous = os.umask(0o022)
    try:
        yield 0o022
    finally:
        os.umask(previous)


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def default_config() -> ScaffoldConfig:
    """기본 설정."""
    return ScaffoldConfig()


@pytest.fixture
def fast_lock_config() -> ScaffoldConfig:
    """락 timeout이 짧은 설정 (타임아웃 테스트용)."""
    return ScaffoldConfig(lock_timeout=0.2)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """codegen-init.yaml 작성 헬퍼."""

    def _write(data: Any, name: str = "codegen-init.yaml") -> Path:
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            with open(path, "w", encoding="utf-8") as f:
                yaml.dump(data, f, allow_unicode=True)
        return path

    return _write
