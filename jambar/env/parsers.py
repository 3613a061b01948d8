"""
環境変数の値パーサーモジュール。

空でない生の文字列を各スペックの型へ変換する純粋関数群。
エラーは変数名を含む EnvError として送出する。
"""

import math
import re
from collections.abc import Sequence

from jambar.errors import InvalidChoiceError, InvalidNumberError

# 真とみなすトークン(大文字小文字は区別しない)
TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})

# 10進数リテラル: 符号、小数部、指数部を許可する
_NUMBER_PATTERN = re.compile(
    r"[+-]?(?:(?P<int>[0-9]+)(?P<frac>\.[0-9]*)?|\.[0-9]+)(?P<exp>[eE][+-]?[0-9]+)?"
)


def parse_number(name: str, raw: str) -> float:
    """生の文字列を有限の数値に変換する。

    前後の空白は無視する。小数部・指数部のない整数リテラルは int を返す。

    Args:
        name: 環境変数名(エラーメッセージ用)
        raw: 環境変数から読み取った文字列

    Returns:
        変換後の数値

    Raises:
        InvalidNumberError: 10進数リテラルでない、または有限値にならない場合
    """
    match = _NUMBER_PATTERN.fullmatch(raw.strip())
    if match is None:
        raise InvalidNumberError(name, raw)

    value = float(match[0])
    if not math.isfinite(value):
        raise InvalidNumberError(name, raw)

    if match["int"] is not None and match["frac"] is None and match["exp"] is None:
        return int(match[0])
    return value


def parse_boolean(raw: str) -> bool:
    """生の文字列を真偽値に変換する。

    TRUTHY_VALUES 以外の値はすべて False とし、エラーは発生しない。
    """
    return raw.lower() in TRUTHY_VALUES


def check_choice(name: str, raw: str, choices: Sequence[str]) -> str:
    """生の文字列が選択肢に含まれることを確認して返す。

    比較は大文字小文字を区別する完全一致。

    Raises:
        InvalidChoiceError: 選択肢に含まれない場合
    """
    if raw not in choices:
        raise InvalidChoiceError(name, raw, choices)
    return raw
