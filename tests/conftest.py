"""
Pytest設定と共有フィクスチャ。

プロジェクト全体で共有されるフィクスチャと設定を定義します。
"""

import pytest
from jambar.env.reader import EnvReaderImpl, get_default_reader


@pytest.fixture
def environ() -> dict[str, str]:
    """EnvReaderImplに注入するテスト用の環境変数テーブルを提供。"""
    return {}


@pytest.fixture
def reader(environ: dict[str, str]) -> EnvReaderImpl:
    """テスト用の環境変数テーブルを参照するEnvReaderImplを提供。"""
    return EnvReaderImpl(environ)


@pytest.fixture(autouse=True)
def clear_default_reader():
    """テストごとにデフォルトリーダーのキャッシュをクリアする。"""
    get_default_reader.cache_clear()
    yield
    get_default_reader.cache_clear()
