"""
프로젝트 스캐폴더: 템플릿 → codegen/ 디렉터리.

규칙:
- 템플릿은 byte-for-byte 그대로 복사 (치환/렌더링 없음)
- 기존 파일은 건드리지 않음 → skipped + 경고 (overwrite=True 일 때만 교체)
- 파일 삭제 없음
- 쓰기 전에 모든 템플릿 구조 검사 (하나라도 실패하면 아무것도 쓰지 않음)
"""

import logging
from contextlib import nullcontext
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from codegen_init.core.config import ScaffoldConfig
from codegen_init.core.fileio import atomic_write_text, project_lock
from codegen_init.domain.errors import ErrorCodes, ScaffoldError

from .elm_syntax import validate_elm_source
from .registry import TemplateLocation, TemplateSpec, list_templates, target_path

logger = logging.getLogger(__name__)

# =============================================================================
# Types
# =============================================================================


@dataclass
class ScaffoldResult:
    """스캐폴딩 결과."""

    codegen_dir: Path
    created: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    dry_run: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "codegen_dir": str(self.codegen_dir),
            "created": [str(p) for p in self.created],
            "skipped": [str(p) for p in self.skipped],
            "warnings": self.warnings,
            "dry_run": self.dry_run,
        }


# =============================================================================
# Scaffold
# =============================================================================


def select_templates(config: ScaffoldConfig) -> list[TemplateSpec]:
    """설정에 따라 쓸 템플릿 선택."""
    return [
        spec
        for spec in list_templates()
        if config.include_helper or spec.location != TemplateLocation.HELPERS
    ]


def scaffold_project(
    project_root: Path,
    config: ScaffoldConfig | None = None,
    *,
    overwrite: bool = False,
    dry_run: bool = False,
) -> ScaffoldResult:
    """
    codegen/ 디렉터리에 starter 파일 생성.

    Args:
        project_root: 프로젝트 루트
        config: 설정 (None이면 기본값)
        overwrite: 기존 파일 덮어쓰기 여부
        dry_run: True면 디스크에 쓰지 않고 계획만 반환

    Returns:
        ScaffoldResult

    Raises:
        ScaffoldError: ELM_SOURCE_INVALID, TARGET_NOT_A_FILE,
            SCAFFOLD_LOCK_TIMEOUT, WRITE_FAILED
    """
    if config is None:
        config = ScaffoldConfig()

    codegen_dir = project_root / config.codegen_dir
    templates = select_templates(config)

    for spec in templates:
        validate_elm_source(spec.content, source=spec.name)

    result = ScaffoldResult(codegen_dir=codegen_dir, dry_run=dry_run)

    # dry-run은 디스크를 건드리지 않으므로 락도 만들지 않음
    lock = (
        nullcontext()
        if dry_run
        else project_lock(project_root, timeout=config.lock_timeout)
    )
    with lock:
        _check_targets(templates, codegen_dir, config)
        for spec in templates:
            _write_one(spec, codegen_dir, config, overwrite, dry_run, result)

    return result


def _check_targets(
    templates: list[TemplateSpec],
    codegen_dir: Path,
    config: ScaffoldConfig,
) -> None:
    """쓰기 전에 대상 경로 충돌 확인 (일부만 쓰인 상태 방지)."""
    for spec in templates:
        target = target_path(spec, codegen_dir, config.helpers_dir)
        if target.is_dir():
            raise ScaffoldError(
                ErrorCodes.TARGET_NOT_A_FILE,
                f"{target} is a directory",
                template=spec.name,
                path=str(target),
            )


def _write_one(
    spec: TemplateSpec,
    codegen_dir: Path,
    config: ScaffoldConfig,
    overwrite: bool,
    dry_run: bool,
    result: ScaffoldResult,
) -> None:
    """단일 템플릿 처리."""
    target = target_path(spec, codegen_dir, config.helpers_dir)

    if target.exists() and not overwrite:
        result.skipped.append(target)
        result.warnings.append(
            f"{target} already exists, left untouched (use --force to overwrite)"
        )
        logger.warning(f"Skipped existing file: {target}")
        return

    if dry_run:
        logger.info(f"[DRY-RUN] Would write {target}")
    else:
        atomic_write_text(target, spec.content)
        logger.info(f"Created {target}")

    result.created.append(target)
