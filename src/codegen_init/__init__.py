"""
codegen_init: elm-codegen 프로젝트 초기화 도구.

`codegen-init` 실행 시 codegen/Generate.elm (starter) 과
codegen/helpers/Helper.elm 을 생성.
"""

from .templates.starter import STARTER_TEMPLATE, get_starter_template

__version__ = "0.1.0"

__all__ = [
    "STARTER_TEMPLATE",
    "get_starter_template",
]
