from typing import Optional
from .tortoise_client.user_repository import TortoiseUserRepository
from ..port.user_repository import UserRepository as UserRepositoryPort

class DIContainer:
    """依存性注入コンテナ（コンポジションルート）"""

    def __init__(self, user_repository: Optional[UserRepositoryPort] = None):
        self._user_repository: Optional[UserRepositoryPort] = user_repository

    @property
    def user_repository(self) -> UserRepositoryPort:
        """ユーザーリポジトリのシングルトンインスタンスを取得"""
        if self._user_repository is None:
            self._user_repository = TortoiseUserRepository()
        return self._user_repository

# グローバルDIコンテナインスタンス
_container = DIContainer()

def get_container() -> DIContainer:
    """DIコンテナを取得"""
    return _container
