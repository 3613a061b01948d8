"""
環境変数リーダーモジュール。

Protocol型でインターフェースを定義し、スペックに従って環境変数を読み取る:
- 未設定または空文字の場合はデフォルト値を返す(なければ MissingVariableError)
- スペックの type に応じて値を解釈・検証する
- 環境変数テーブルは読み取り専用として扱い、値のキャッシュは行わない
"""

import logging
import os
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Protocol, TypeVar, assert_never, overload

from jambar.env.parsers import check_choice, parse_boolean, parse_number
from jambar.errors import MissingVariableError
from jambar.spec.models import BooleanSpec, EnumSpec, NumberSpec, StringSpec, parse_spec

C = TypeVar("C", bound=str)

logger = logging.getLogger(__name__)


class EnvReader(Protocol):
    """環境変数リーダーのプロトコル型。"""

    @overload
    def read(self, name: str, spec: StringSpec) -> str: ...

    @overload
    def read(self, name: str, spec: NumberSpec) -> float: ...

    @overload
    def read(self, name: str, spec: BooleanSpec) -> bool: ...

    @overload
    def read(self, name: str, spec: EnumSpec[C]) -> C: ...

    @overload
    def read(self, name: str, spec: Mapping[str, Any]) -> str | float | bool: ...

    def read(self, name: str, spec: Any) -> Any:
        """スペックに従って環境変数を読み取る。

        Args:
            name: 環境変数名
            spec: スペックモデル、または辞書形式のスペック

        Returns:
            スペックの type に対応する型の値
        """
        ...


class EnvReaderImpl:
    """EnvReaderの実装。

    機能:
    - 依存性注入パターン(環境変数テーブルを引数で受け取る)
    - 辞書形式のスペックは読み取り前に検証してモデルへ変換する

    Attributes:
        _environ: 参照する環境変数テーブル。Noneの場合は os.environ。
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """EnvReaderImplを初期化する。

        Args:
            environ: 環境変数テーブル。Noneの場合はプロセスの os.environ を参照する。
        """
        self._environ: Mapping[str, str] = os.environ if environ is None else environ

    @overload
    def read(self, name: str, spec: StringSpec) -> str: ...

    @overload
    def read(self, name: str, spec: NumberSpec) -> float: ...

    @overload
    def read(self, name: str, spec: BooleanSpec) -> bool: ...

    @overload
    def read(self, name: str, spec: EnumSpec[C]) -> C: ...

    @overload
    def read(self, name: str, spec: Mapping[str, Any]) -> str | float | bool: ...

    def read(self, name: str, spec: Any) -> Any:
        """スペックに従って環境変数を読み取る。

        未設定と空文字は同じ扱いとし、デフォルト値がある場合はそれを
        解釈・検証せずにそのまま返す。

        Args:
            name: 環境変数名
            spec: スペックモデル、または辞書形式のスペック

        Returns:
            スペックの type に対応する型の値

        Raises:
            MissingVariableError: 未設定でデフォルト値がない場合
            InvalidNumberError: number型で数値として解釈できない場合
            InvalidChoiceError: enum型で選択肢に含まれない場合
            pydantic.ValidationError: 辞書形式のスペックが不正な場合
        """
        spec = parse_spec(spec)
        raw = self._environ.get(name)

        if not raw:
            if spec.default is None:
                raise MissingVariableError(name)
            logger.debug("Environment variable %s is not set, using default", name)
            return spec.default

        match spec:
            case StringSpec():
                return raw
            case NumberSpec():
                return parse_number(name, raw)
            case BooleanSpec():
                return parse_boolean(raw)
            case EnumSpec():
                return check_choice(name, raw, spec.choices)
            case _:
                assert_never(spec)


@lru_cache
def get_default_reader() -> EnvReaderImpl:
    """プロセスの os.environ を参照する EnvReaderImpl をキャッシュして返す。

    os.environ は都度参照されるため、キャッシュされるのはリーダーのみで
    環境変数の値はキャッシュされない。

    Returns:
        EnvReaderImpl: キャッシュされたリーダーインスタンス
    """
    return EnvReaderImpl()


@overload
def get_env(name: str, spec: StringSpec) -> str: ...


@overload
def get_env(name: str, spec: NumberSpec) -> float: ...


@overload
def get_env(name: str, spec: BooleanSpec) -> bool: ...


@overload
def get_env(name: str, spec: EnumSpec[C]) -> C: ...


@overload
def get_env(name: str, spec: Mapping[str, Any]) -> str | float | bool: ...


def get_env(name: str, spec: Any) -> Any:
    """プロセスの環境変数をスペックに従って読み取る。

    get_default_reader().read(name, spec) と同じ。
    """
    return get_default_reader().read(name, spec)
