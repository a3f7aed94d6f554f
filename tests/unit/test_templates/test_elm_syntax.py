"""
test_elm_syntax.py - Elm 구조 검사 테스트

검증:
- 정상 소스 → 문제 없음
- 탭, 괄호 불일치, 닫히지 않은 문자열/주석, 헤더 누락 감지
- 주석/문자열 안의 괄호는 무시
- exposing 항목의 최상위 정의 확인
"""

import pytest

from codegen_init.domain.errors import ErrorCodes, ScaffoldError
from codegen_init.templates.elm_syntax import (
    check_elm_source,
    module_name,
    strip_comments_and_literals,
    validate_elm_source,
)

HEADER = "module Main exposing (main)\n\n"


# =============================================================================
# strip_comments_and_literals 테스트
# =============================================================================


class TestStripCommentsAndLiterals:
    """strip_comments_and_literals 함수 테스트."""

    def test_preserves_length_and_lines(self):
        """위치 보존: 길이/줄 수 동일."""
        text = 'a = "x(y"\n-- (\n{- [\n -}\nb = \'(\'\n'

        code, issues = strip_comments_and_literals(text)

        assert issues == []
        assert len(code) == len(text)
        assert code.count("\n") == text.count("\n")

    def test_removes_brackets_inside_literals(self):
        code, _ = strip_comments_and_literals('x = "(" ++ """[\n{""" -- )\n')

        assert "(" not in code
        assert "[" not in code
        assert ")" not in code

    def test_handles_escaped_quote(self):
        """이스케이프된 따옴표는 문자열 종료 아님."""
        code, issues = strip_comments_and_literals('x = "a\\"(b"\n')

        assert issues == []
        assert "(" not in code

    def test_nested_block_comment(self):
        """블록 주석 중첩."""
        code, issues = strip_comments_and_literals("{- a {- b -} ( -}\nx = 1\n")

        assert issues == []
        assert "(" not in code
        assert "x = 1" in code


# =============================================================================
# check_elm_source 테스트
# =============================================================================


class TestCheckElmSourceValid:
    """정상 소스."""

    def test_minimal_module(self):
        assert check_elm_source(HEADER + 'main =\n    Html.text "hi"\n') == []

    def test_doc_comment_before_header(self):
        """헤더 앞 주석 허용."""
        text = "{-| docs -}\n" + HEADER + "main = 1\n"

        assert check_elm_source(text) == []

    def test_brackets_in_comments_and_strings_ignored(self):
        text = (
            HEADER
            + "-- ((( {Whatever}\n"
            + "{- [[ {- nested -} -}\n"
            + 'main =\n    "((" ++ String.fromChar \')\'\n'
        )

        assert check_elm_source(text) == []

    def test_multiline_exposing(self):
        text = (
            "module Main exposing\n"
            "    ( main\n"
            "    , view\n"
            "    )\n\n"
            "main = 1\n\n"
            "view x =\n    x\n"
        )

        assert check_elm_source(text) == []

    def test_expose_all(self):
        assert check_elm_source("module Main exposing (..)\n\nfoo = 1\n") == []

    def test_types_in_exposing_not_required_as_values(self):
        text = (
            "module Main exposing (Model, Msg(..), main)\n\n"
            "type Msg\n    = Go\n\n"
            "type alias Model =\n    {}\n\n"
            "main = 1\n"
        )

        assert check_elm_source(text) == []

    def test_port_declaration_counts_as_definition(self):
        """port 선언은 본문 없이도 정의."""
        text = (
            "port module Ports exposing (receive, send)\n\n"
            "port send : String -> Cmd msg\n\n"
            "port receive : (String -> msg) -> Sub msg\n"
        )

        assert check_elm_source(text) == []


class TestCheckElmSourceInvalid:
    """문제 감지."""

    def test_tab_character(self):
        issues = check_elm_source(HEADER + "main =\n\t1\n")

        assert "tab character at line 4" in issues

    def test_unclosed_paren(self):
        issues = check_elm_source(HEADER + "main =\n    foo (bar\n")

        assert "unclosed '(' from line 4" in issues

    def test_unexpected_closer(self):
        issues = check_elm_source(HEADER + "main =\n    foo)\n")

        assert "unexpected ')' at line 4" in issues

    def test_mismatched_brackets(self):
        issues = check_elm_source(HEADER + "main =\n    [ 1 )\n")

        assert any("does not close '['" in i for i in issues)

    def test_unterminated_string(self):
        issues = check_elm_source(HEADER + 'main =\n    "abc\n')

        assert "unterminated string at line 4" in issues

    def test_unterminated_block_comment(self):
        issues = check_elm_source(HEADER + "{- oops\nmain = 1\n")

        assert "unterminated block comment starting at line 3" in issues

    def test_missing_header(self):
        issues = check_elm_source("main = 1\n")

        assert any("missing 'module" in i for i in issues)

    def test_empty_exposing(self):
        issues = check_elm_source("module Main exposing ()\n\nmain = 1\n")

        assert "empty exposing list in module header" in issues

    def test_exposed_value_without_definition(self):
        issues = check_elm_source(
            "module Main exposing (main, view)\n\nmain = 1\n"
        )

        assert issues == ["exposed value 'view' has no top-level definition"]

    def test_annotation_is_not_definition(self):
        """타입 시그니처만 있고 정의가 없으면 실패."""
        issues = check_elm_source(HEADER + "main : Int\n")

        assert issues == ["exposed value 'main' has no top-level definition"]

    def test_port_module_missing_declaration(self):
        issues = check_elm_source(
            "port module Ports exposing (send, receive)\n\n"
            "port send : String -> Cmd msg\n"
        )

        assert issues == ["exposed value 'receive' has no top-level definition"]

    def test_indented_definition_is_not_top_level(self):
        issues = check_elm_source(HEADER + "  main = 1\n")

        assert issues == ["exposed value 'main' has no top-level definition"]


# =============================================================================
# module_name 테스트
# =============================================================================


class TestModuleName:
    """module_name 함수 테스트."""

    def test_dotted_name(self):
        assert module_name("module Gen.Helper exposing (x)\n\nx = 1\n") == "Gen.Helper"

    def test_port_module(self):
        assert module_name("port module Ports exposing (..)\n") == "Ports"

    def test_no_header(self):
        assert module_name("x = 1\n") is None

    def test_lowercase_module_rejected(self):
        assert module_name("module main exposing (x)\n") is None


# =============================================================================
# validate_elm_source 테스트
# =============================================================================


class TestValidateElmSource:
    """validate_elm_source 함수 테스트."""

    def test_valid_returns_none(self):
        assert validate_elm_source(HEADER + "main = 1\n") is None

    def test_invalid_raises_with_issues(self):
        with pytest.raises(ScaffoldError) as exc_info:
            validate_elm_source("main = (\n", source="broken")

        error = exc_info.value
        assert error.code == ErrorCodes.ELM_SOURCE_INVALID
        assert error.context["source"] == "broken"
        assert error.context["issues"]
        assert "broken" in str(error)
