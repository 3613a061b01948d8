"""
環境変数スペックモジュール。

環境変数の解釈方法(型・デフォルト値・選択肢)を宣言するモデルを提供する。
"""

from jambar.spec.models import (
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
    "EnvSpec",
    "NumberSpec",
    "StringSpec",
    "parse_spec",
]
