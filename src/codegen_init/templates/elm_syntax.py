"""
Elm 소스 구조 검사 (smoke test 수준).

elm 컴파일러를 대신하지 않음. 템플릿을 디스크에 쓰기 전에
명백히 깨진 소스(괄호 불일치, 모듈 헤더 누락 등)만 걸러냄.

검사 항목:
- 탭 문자 금지 (Elm 컴파일러가 거부함)
- 첫 코드 라인은 `module <Name> exposing (...)`
- (), [], {} 균형 (문자열/문자/주석 내부는 제외)
- 문자열, 블록 주석은 반드시 닫혀야 함
- exposing 에 나열된 값은 최상위(0열) 정의가 있어야 함
"""

import re

from codegen_init.domain.errors import ErrorCodes, ScaffoldError

# =============================================================================
# Patterns
# =============================================================================

MODULE_NAME = r"[A-Z][A-Za-z0-9_]*(?:\.[A-Z][A-Za-z0-9_]*)*"

MODULE_HEADER_PATTERN = re.compile(
    rf"(?:port\s+|effect\s+)?module\s+({MODULE_NAME})\s+exposing\s*\("
)

# 0열에서 시작하는 소문자 식별자 (타입 시그니처 `name :` 제외)
TOP_LEVEL_VALUE_PATTERN = re.compile(
    r"^([a-z][A-Za-z0-9_]*)\b(?![ \t]*:)", re.MULTILINE
)

# port 모듈의 `port name : ...` 선언 (본문 없이 정의로 취급)
PORT_DECLARATION_PATTERN = re.compile(
    r"^port[ \t]+([a-z][A-Za-z0-9_]*)[ \t]*:", re.MULTILINE
)

RESERVED_WORDS = frozenset({
    "module", "import", "exposing", "as", "type", "alias", "port",
    "effect", "infix", "where", "if", "then", "else", "case", "of",
    "let", "in",
})

BRACKET_PAIRS = {")": "(", "]": "[", "}": "{"}


# =============================================================================
# Lexical Stripping
# =============================================================================


def _line_of(text: str, index: int) -> int:
    """index 위치의 1-based 라인 번호."""
    return text.count("\n", 0, index) + 1


def _blank(chunk: str) -> str:
    """줄바꿈만 남기고 공백으로 치환 (라인/열 위치 보존)."""
    return "".join("\n" if c == "\n" else " " for c in chunk)


def strip_comments_and_literals(text: str) -> tuple[str, list[str]]:
    """
    주석, 문자열, 문자 리터럴을 공백으로 치환.

    위치(라인/열)는 그대로 유지되므로 이후 검사에서
    원본 라인 번호를 그대로 보고할 수 있음.

    Args:
        text: Elm 소스

    Returns:
        (치환된 코드, 발견된 문제 목록)
    """
    out: list[str] = []
    issues: list[str] = []
    i = 0
    n = len(text)

    while i < n:
        # 블록 주석 (중첩 허용)
        if text.startswith("{-", i):
            start = i
            depth = 0
            while i < n:
                if text.startswith("{-", i):
                    depth += 1
                    i += 2
                elif text.startswith("-}", i):
                    depth -= 1
                    i += 2
                    if depth == 0:
                        break
                else:
                    i += 1
            if depth > 0:
                issues.append(
                    f"unterminated block comment starting at line {_line_of(text, start)}"
                )
            out.append(_blank(text[start:i]))
            continue

        # 라인 주석
        if text.startswith("--", i):
            end = text.find("\n", i)
            if end == -1:
                end = n
            out.append(_blank(text[i:end]))
            i = end
            continue

        # 여러 줄 문자열
        if text.startswith('"""', i):
            start = i
            i += 3
            closed = False
            while i < n:
                if text[i] == "\\":
                    i += 2
                    continue
                if text.startswith('"""', i):
                    i += 3
                    closed = True
                    break
                i += 1
            if not closed:
                issues.append(
                    f"unterminated multi-line string starting at line {_line_of(text, start)}"
                )
                i = n
            out.append(_blank(text[start:i]))
            continue

        # 한 줄 문자열 / 문자 리터럴
        if text[i] in "\"'":
            quote = text[i]
            start = i
            i += 1
            closed = False
            while i < n and text[i] != "\n":
                if text[i] == "\\":
                    i += 2
                    continue
                if text[i] == quote:
                    i += 1
                    closed = True
                    break
                i += 1
            if not closed:
                kind = "string" if quote == '"' else "char literal"
                issues.append(f"unterminated {kind} at line {_line_of(text, start)}")
            out.append(_blank(text[start:i]))
            continue

        out.append(text[i])
        i += 1

    return "".join(out), issues


# =============================================================================
# Individual Checks
# =============================================================================


def _check_tabs(text: str) -> list[str]:
    for lineno, line in enumerate(text.splitlines(), start=1):
        if "\t" in line:
            return [f"tab character at line {lineno}"]
    return []


def _check_brackets(code: str) -> list[str]:
    stack: list[tuple[str, int]] = []
    issues: list[str] = []

    for index, char in enumerate(code):
        if char in "([{":
            stack.append((char, _line_of(code, index)))
        elif char in BRACKET_PAIRS:
            line = _line_of(code, index)
            if not stack:
                issues.append(f"unexpected '{char}' at line {line}")
                continue
            opener, opened_at = stack.pop()
            if opener != BRACKET_PAIRS[char]:
                issues.append(
                    f"'{char}' at line {line} does not close '{opener}' "
                    f"from line {opened_at}"
                )

    for opener, opened_at in stack:
        issues.append(f"unclosed '{opener}' from line {opened_at}")

    return issues


def _find_header(code: str) -> re.Match[str] | None:
    """첫 코드 라인에서 모듈 헤더 매칭."""
    stripped = code.lstrip()
    offset = len(code) - len(stripped)
    return MODULE_HEADER_PATTERN.match(code, offset)


def _exposing_items(code: str, open_paren: int) -> list[str] | None:
    """
    `exposing (` 다음부터 짝이 맞는 `)` 까지 항목 분리.

    Returns:
        항목 목록 (괄호가 닫히지 않으면 None)
    """
    depth = 0
    items: list[str] = []
    current: list[str] = []

    for char in code[open_paren:]:
        if char == "(":
            depth += 1
            if depth == 1:
                continue
        elif char == ")":
            depth -= 1
            if depth == 0:
                items.append("".join(current).strip())
                return [item for item in items if item]
        elif char == "," and depth == 1:
            items.append("".join(current).strip())
            current = []
            continue
        current.append(char)

    return None


def _top_level_values(code: str) -> set[str]:
    values = {
        name
        for name in TOP_LEVEL_VALUE_PATTERN.findall(code)
        if name not in RESERVED_WORDS
    }
    values.update(PORT_DECLARATION_PATTERN.findall(code))
    return values


# =============================================================================
# Public API
# =============================================================================


def module_name(text: str) -> str | None:
    """선언된 모듈 이름 (헤더가 없으면 None)."""
    code, _ = strip_comments_and_literals(text)
    match = _find_header(code)
    return match.group(1) if match else None


def check_elm_source(text: str) -> list[str]:
    """
    Elm 소스 구조 검사.

    Args:
        text: Elm 소스 전체

    Returns:
        문제 목록 (비어 있으면 통과)
    """
    issues = _check_tabs(text)

    code, lexical_issues = strip_comments_and_literals(text)
    issues.extend(lexical_issues)
    issues.extend(_check_brackets(code))

    header = _find_header(code)
    if header is None:
        issues.append("missing 'module <Name> exposing (...)' header")
        return issues

    exposed = _exposing_items(code, header.end() - 1)
    if exposed is None:
        issues.append("unterminated exposing list in module header")
        return issues
    if not exposed:
        issues.append("empty exposing list in module header")
        return issues

    if exposed != [".."]:
        defined = _top_level_values(code)
        for item in exposed:
            if item[0].islower() and item not in defined:
                issues.append(f"exposed value '{item}' has no top-level definition")

    return issues


def validate_elm_source(text: str, source: str = "<string>") -> None:
    """
    구조 검사 실패 시 예외.

    Args:
        text: Elm 소스
        source: 에러 컨텍스트용 이름 (템플릿 이름, 파일 경로 등)

    Raises:
        ScaffoldError: ELM_SOURCE_INVALID
    """
    issues = check_elm_source(text)
    if issues:
        raise ScaffoldError(
            ErrorCodes.ELM_SOURCE_INVALID,
            f"{source} failed Elm structure check",
            source=source,
            issues=issues,
        )
