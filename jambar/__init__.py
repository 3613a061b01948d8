"""
jambar: 型付きの環境変数アクセサ。

変数名とスペック(型・デフォルト値・選択肢)から、解釈済みの値を返すか
説明的なエラーを送出する。
"""

from jambar.env import EnvReader, EnvReaderImpl, get_default_reader, get_env
from jambar.errors import (
    EnvError,
    InvalidChoiceError,
    InvalidNumberError,
    MissingVariableError,
)
from jambar.spec import (
    BooleanSpec,
    EnumSpec,
    EnvSpec,
    NumberSpec,
    StringSpec,
    parse_spec,
)

__all__ = [
    "BooleanSpec",
    "EnumSpec",
    "EnvError",
    "EnvReader",
    "EnvReaderImpl",
    "EnvSpec",
    "InvalidChoiceError",
    "InvalidNumberError",
    "MissingVariableError",
    "NumberSpec",
    "StringSpec",
    "get_default_reader",
    "get_env",
    "parse_spec",
]
