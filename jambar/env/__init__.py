"""
環境変数読み取りモジュール。

スペックに従ってプロセスの環境変数を型付きの値として読み取る。
"""

from jambar.env.reader import (
    EnvReader,
    EnvReaderImpl,
    get_default_reader,
    get_env,
)

__all__ = [
    "EnvReader",
    "EnvReaderImpl",
    "get_default_reader",
    "get_env",
]
