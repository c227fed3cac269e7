"""
パスワードハッシュ化モジュール

ドメイン層はハッシュ化済みのパスワードのみを扱うため、
平文パスワードは HTTP 境界でこのモジュールを通してハッシュ化する。
"""

from functools import lru_cache

from passlib.context import CryptContext

from .config import get_settings


@lru_cache
def get_password_context() -> CryptContext:
    """設定されたスキームの CryptContext を取得する"""
    return CryptContext(schemes=[get_settings().password_hash_scheme], deprecated="auto")


def get_password_hash(password: str) -> str:
    """
    パスワードをハッシュ化する

    自動的にソルトが生成されるため、同じ入力でも毎回異なるハッシュとなる。

    Args:
        password (str): ハッシュ化する平文パスワード

    Returns:
        str: ハッシュ化されたパスワード文字列
    """
    return get_password_context().hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """平文パスワードがハッシュと一致するか検証する"""
    return get_password_context().verify(plain_password, hashed_password)
