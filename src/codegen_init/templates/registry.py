"""
템플릿 레지스트리: 이름 → 템플릿 + 배치 위치.

등록 순서 = 쓰기 순서 (starter 먼저).
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from codegen_init.domain.constants import (
    DEFAULT_HELPERS_DIR,
    HELPER_FILENAME,
    STARTER_FILENAME,
)
from codegen_init.domain.errors import ErrorCodes, ScaffoldError

from .helper import HELPER_TEMPLATE
from .starter import STARTER_TEMPLATE


class TemplateLocation(str, Enum):
    """codegen/ 기준 배치 위치."""
    ROOT = "root"        # codegen/
    HELPERS = "helpers"  # codegen/<helpers_dir>/


@dataclass(frozen=True)
class TemplateSpec:
    """등록된 템플릿."""
    name: str
    filename: str
    location: TemplateLocation
    description: str
    content: str


_TEMPLATES: tuple[TemplateSpec, ...] = (
    TemplateSpec(
        name="starter",
        filename=STARTER_FILENAME,
        location=TemplateLocation.ROOT,
        description="Generate.elm entry point producing HelloWorld.elm",
        content=STARTER_TEMPLATE,
    ),
    TemplateSpec(
        name="helper",
        filename=HELPER_FILENAME,
        location=TemplateLocation.HELPERS,
        description="Helper module exposed to codegen as Gen.Helper",
        content=HELPER_TEMPLATE,
    ),
)


def list_templates() -> list[TemplateSpec]:
    """등록된 템플릿 목록 (등록 순서)."""
    return list(_TEMPLATES)


def get_template(name: str) -> TemplateSpec:
    """
    이름으로 템플릿 조회.

    Args:
        name: 템플릿 이름 (starter, helper)

    Returns:
        TemplateSpec

    Raises:
        ScaffoldError: TEMPLATE_NOT_FOUND
    """
    for spec in _TEMPLATES:
        if spec.name == name:
            return spec

    raise ScaffoldError(
        ErrorCodes.TEMPLATE_NOT_FOUND,
        f"Template '{name}' not found",
        name=name,
        available=[spec.name for spec in _TEMPLATES],
    )


def target_path(
    spec: TemplateSpec,
    codegen_dir: Path,
    helpers_dir: str = DEFAULT_HELPERS_DIR,
) -> Path:
    """
    템플릿이 쓰일 경로.

    Args:
        spec: 템플릿
        codegen_dir: codegen/ 디렉터리
        helpers_dir: helper 하위 디렉터리 이름

    Returns:
        대상 파일 경로
    """
    if spec.location == TemplateLocation.HELPERS:
        return codegen_dir / helpers_dir / spec.filename
    return codegen_dir / spec.filename
