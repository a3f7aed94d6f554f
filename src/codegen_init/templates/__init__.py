"""
Templates layer: starter 템플릿 제공 + 스캐폴딩.

역할:
- 불변 템플릿 상수 (starter.py, helper.py)
- 이름 → 템플릿 조회 (registry.py)
- Elm 구조 검사 (elm_syntax.py)
- codegen/ 생성 (scaffolder.py)
"""

from .elm_syntax import check_elm_source, module_name, validate_elm_source
from .helper import HELPER_TEMPLATE, get_helper_template
from .registry import (
    TemplateLocation,
    TemplateSpec,
    get_template,
    list_templates,
    target_path,
)
from .scaffolder import ScaffoldResult, scaffold_project
from .starter import STARTER_TEMPLATE, get_starter_template

__all__ = [
    # starter / helper
    "STARTER_TEMPLATE",
    "get_starter_template",
    "HELPER_TEMPLATE",
    "get_helper_template",
    # registry
    "TemplateLocation",
    "TemplateSpec",
    "get_template",
    "list_templates",
    "target_path",
    # elm_syntax
    "check_elm_source",
    "module_name",
    "validate_elm_source",
    # scaffolder
    "ScaffoldResult",
    "scaffold_project",
]
