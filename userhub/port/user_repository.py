from typing import Protocol, Optional
from ..domain.entity.user_entity import UserEntity
from ..domain.value_object.user_values import Email, TagName, UserUuid

class UserRepository(Protocol):
    """
    ユーザーデータの永続化インターフェース。

    検索系は該当なしの場合 None を返す。
    create は一意制約違反時に UserStoreConflictError、
    ストアに到達できない場合は StoreUnavailableError を送出する。
    """

    async def find_by_uuid(self, uuid: UserUuid) -> Optional[UserEntity]:
        ...

    async def find_by_email(self, email: Email) -> Optional[UserEntity]:
        ...

    async def find_by_tag_name(self, tag_name: TagName) -> Optional[UserEntity]:
        ...

    async def create(self, user: UserEntity) -> None:
        ...
