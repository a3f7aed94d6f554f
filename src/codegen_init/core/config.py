"""
설정 로드: codegen-init.yaml

예시:
    scaffold:
      codegen_dir: codegen
      helpers_dir: helpers
      include_helper: true
      lock_timeout: 10
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from codegen_init.domain.constants import (
    CONFIG_FILENAME,
    CONFIG_SECTION,
    DEFAULT_CODEGEN_DIR,
    DEFAULT_HELPERS_DIR,
    DEFAULT_LOCK_TIMEOUT,
)
from codegen_init.domain.errors import ErrorCodes, ScaffoldError


@dataclass
class ScaffoldConfig:
    """스캐폴딩 설정."""
    codegen_dir: str = DEFAULT_CODEGEN_DIR
    helpers_dir: str = DEFAULT_HELPERS_DIR
    include_helper: bool = True
    lock_timeout: float = DEFAULT_LOCK_TIMEOUT

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScaffoldConfig":
        include_helper = data.get("include_helper", True)
        # YAML 문자열 "false" 등은 bool()로 True가 되므로 거부
        if not isinstance(include_helper, bool):
            raise ValueError(
                f"include_helper must be true or false, got {include_helper!r}"
            )

        return cls(
            codegen_dir=str(data.get("codegen_dir", DEFAULT_CODEGEN_DIR)),
            helpers_dir=str(data.get("helpers_dir", DEFAULT_HELPERS_DIR)),
            include_helper=include_helper,
            lock_timeout=float(data.get("lock_timeout", DEFAULT_LOCK_TIMEOUT)),
        )


def find_config(project_root: Path | None = None) -> Path | None:
    """
    codegen-init.yaml 탐색: project_root 먼저, 그다음 현재 디렉터리.

    Returns:
        설정 파일 경로 (없으면 None)
    """
    search_dirs = [project_root] if project_root is not None else []
    search_dirs.append(Path.cwd())

    for directory in search_dirs:
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(
    config_path: Path | None = None,
    project_root: Path | None = None,
) -> ScaffoldConfig:
    """
    설정 파일 로드.

    Args:
        config_path: 설정 파일 경로. None이면 project_root, 현재 디렉터리
            순서로 codegen-init.yaml 탐색 (없으면 기본값)
        project_root: 스캐폴딩 대상 프로젝트 루트

    Returns:
        ScaffoldConfig

    Raises:
        ScaffoldError: CONFIG_NOT_FOUND (명시한 경로가 없음),
            CONFIG_INVALID (YAML 파싱 실패, 잘못된 값)
    """
    if config_path is None:
        config_path = find_config(project_root)
        if config_path is None:
            return ScaffoldConfig()
    elif not config_path.exists():
        raise ScaffoldError(
            ErrorCodes.CONFIG_NOT_FOUND,
            f"Config file not found: {config_path}",
            path=str(config_path),
        )

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ScaffoldError(
            ErrorCodes.CONFIG_INVALID,
            f"Config file is not valid YAML: {e}",
            path=str(config_path),
        ) from e

    if not isinstance(data, dict):
        raise ScaffoldError(
            ErrorCodes.CONFIG_INVALID,
            "Config root must be a mapping",
            path=str(config_path),
        )

    section = data.get(CONFIG_SECTION) or {}
    if not isinstance(section, dict):
        raise ScaffoldError(
            ErrorCodes.CONFIG_INVALID,
            f"'{CONFIG_SECTION}' section must be a mapping",
            path=str(config_path),
        )

    try:
        return ScaffoldConfig.from_dict(section)
    except (TypeError, ValueError) as e:
        raise ScaffoldError(
            ErrorCodes.CONFIG_INVALID,
            f"Invalid config value: {e}",
            path=str(config_path),
        ) from e
