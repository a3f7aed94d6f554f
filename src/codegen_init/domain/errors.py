"""
Error definitions for the initializer.

규칙:
- 조용한 실패 금지 → ScaffoldError로 명시적 실패
- 기존 파일은 절대 삭제하지 않음 (덮어쓰기는 --force 일 때만)
"""

from typing import Any


class ScaffoldError(Exception):
    """
    스캐폴딩 중단이 필요한 경우 발생하는 에러.

    사용 예:
    - 등록되지 않은 템플릿 이름
    - 템플릿이 Elm 구조 검사를 통과하지 못함
    - 대상 경로가 디렉터리임
    - 락 timeout, 설정 파일 오류

    Usage:
        raise ScaffoldError("TEMPLATE_NOT_FOUND", "unknown template", name="foo")
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Templates ===
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    ELM_SOURCE_INVALID = "ELM_SOURCE_INVALID"

    # === Scaffold ===
    TARGET_NOT_A_FILE = "TARGET_NOT_A_FILE"
    SCAFFOLD_LOCK_TIMEOUT = "SCAFFOLD_LOCK_TIMEOUT"
    WRITE_FAILED = "WRITE_FAILED"

    # === Config ===
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
