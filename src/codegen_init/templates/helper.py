"""
Helper 템플릿: `codegen/helpers/Helper.elm`.

starter의 `Gen.Helper.add5` 호출이 가리키는 모듈.
`elm-codegen install` 후 `Gen.Helper` 바인딩으로 생성됨.
"""

HELPER_TEMPLATE = """module Helper exposing (add5)


add5 : Int -> Int
add5 x =
    x + 5
"""


def get_helper_template() -> str:
    """helper 템플릿 반환."""
    return HELPER_TEMPLATE
