"""
環境変数読み取りのエラー定義モジュール。

EnvReader が送出する例外を定義する:
- EnvError: 全エラーの基底クラス
- MissingVariableError: 必須の環境変数が未設定
- InvalidNumberError: 数値として解釈できない
- InvalidChoiceError: 列挙値の選択肢に含まれない

いずれも呼び出し元へそのまま送出され、ライブラリ内では握りつぶさない。
"""

from collections.abc import Sequence


class EnvError(Exception):
    """環境変数読み取りエラーの基底クラス。

    Attributes:
        name: 対象の環境変数名
    """

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class MissingVariableError(EnvError):
    """環境変数が未設定(または空文字)で、デフォルト値もない場合のエラー。"""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Missing required environment variable: {name}")


class InvalidNumberError(EnvError, ValueError):
    """number型の値が有限の数値として解釈できない場合のエラー。

    Attributes:
        raw: 環境変数から読み取った元の文字列
    """

    def __init__(self, name: str, raw: str) -> None:
        super().__init__(name, f'Env {name}: expected number, got "{raw}"')
        self.raw = raw


class InvalidChoiceError(EnvError, ValueError):
    """enum型の値が選択肢に含まれない場合のエラー。

    メッセージには選択肢を宣言順のまま ", " 区切りで列挙する。

    Attributes:
        raw: 環境変数から読み取った元の文字列
        choices: 許可された選択肢(宣言順)
    """

    def __init__(self, name: str, raw: str, choices: Sequence[str]) -> None:
        super().__init__(name, f"Env {name}: must be one of [{', '.join(choices)}]")
        self.raw = raw
        self.choices = tuple(choices)
