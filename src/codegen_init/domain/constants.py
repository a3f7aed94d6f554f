"""
Domain Constants: 초기화 도구 전역 상수.

경로/파일명 정책 등 시스템 전반에서 사용되는 값들.
"""

# =============================================================================
# Project Layout (생성되는 디렉터리 구조)
# =============================================================================
# <project_root>/
# ├── codegen-init.yaml      # (선택) 설정
# ├── .codegen-init.lock     # 동시 실행 방지 락
# └── codegen/
#     ├── Generate.elm       # starter
#     └── helpers/
#         └── Helper.elm     # helper 예시

DEFAULT_CODEGEN_DIR = "codegen"
DEFAULT_HELPERS_DIR = "helpers"

STARTER_FILENAME = "Generate.elm"
HELPER_FILENAME = "Helper.elm"

CONFIG_FILENAME = "codegen-init.yaml"
CONFIG_SECTION = "scaffold"

LOCK_FILENAME = ".codegen-init.lock"
DEFAULT_LOCK_TIMEOUT = 10.0

# =============================================================================
# Encoding
# =============================================================================

TEMPLATE_ENCODING = "utf-8"
