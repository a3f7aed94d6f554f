"""
Starter 템플릿: `codegen/Generate.elm` 에 그대로 복사되는 예시 소스.

불변 상수. 렌더링/치환 없음 (byte-for-byte 복사).
"""

STARTER_TEMPLATE = """
module Generate exposing (main)

{-| -}

import Elm
import Elm.Annotation as Type
import Gen.CodeGen.Generate as Generate
import Gen.Helper


main : Program {} () ()
main =
    Platform.worker
        { init =
            \\json ->
                ( ()
                , Generate.files
                    [ file
                    ]
                )
        , update =
            \\msg model ->
                ( model, Cmd.none )
        , subscriptions = \\_ -> Sub.none
        }


file : Elm.File
file =
    Elm.file [ "HelloWorld" ]
        [ Elm.declaration "hello"
            (Elm.string "World!")

        -- Here's an example of using a helper file!
        -- Add functions to codegen/helpers/{Whatever}.elm
        -- run elm-codegen install
        -- Then you can call those functions using import Gen.{Whatever}
        , Elm.declaration "usingAHelper"
            (Gen.Helper.add5 20)
        ]
"""


def get_starter_template() -> str:
    """starter 템플릿 반환 (항상 동일한 값)."""
    return STARTER_TEMPLATE
