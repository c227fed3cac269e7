"""
FastAPI依存性注入の定義

DIコンテナから適切なサービスインスタンスを取得し、FastAPIの依存性システムに
統合するためのアダプターレイヤーとして機能します。
"""

from fastapi import Depends
from typing import Annotated

from ..di import get_container
from ...usecase.user_management.register_user import RegisterUserUseCase
from ...port.user_repository import UserRepository

def get_user_repository_dependency() -> UserRepository:
    """
    ユーザーリポジトリの依存性を取得

    Returns:
        UserRepository: ユーザーデータアクセスインスタンス
    """
    return get_container().user_repository

def get_register_user_usecase(
    user_repo: Annotated[UserRepository, Depends(get_user_repository_dependency)]
) -> RegisterUserUseCase:
    """
    ユーザー登録ユースケースを取得

    Args:
        user_repo: ユーザーリポジトリインスタンス

    Returns:
        RegisterUserUseCase: ユーザー登録ユースケースインスタンス
    """
    return RegisterUserUseCase(user_repo)
