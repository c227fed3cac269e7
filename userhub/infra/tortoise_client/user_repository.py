import asyncio
import re
from contextlib import asynccontextmanager
from typing import Optional

from tortoise.exceptions import DBConnectionError, IntegrityError, OperationalError

from ...port.user_repository import UserRepository
from ...port.dto.user_dto import UserRecordDTO
from ...domain.entity.user_entity import UserEntity
from ...domain.exception.user_exceptions import StoreUnavailableError, UserStoreConflictError
from ...domain.value_object.user_values import Email, TagName, UserUuid
from ..logging_config import get_logger
from ..user_record_adapter import entity_to_record, record_to_entity
from .models import User

logger = get_logger("infra.user_repository")

# DB column name -> entity attribute name
_UNIQUE_COLUMNS = {
    "tagName": "tag_name",
    "email": "email",
    "uuid": "uuid",
}


# Where each driver names the violated key; the rest of the message may echo user input
_CONSTRAINT_PATTERNS = (
    re.compile(r"UNIQUE constraint failed: ([\w.]+)"),  # SQLite
    re.compile(r"constraint \"([^\"]+)\""),  # PostgreSQL
    re.compile(r"for key '([^']+)'"),  # MySQL
)


def conflict_field_from_error(error: Exception) -> Optional[str]:
    """Find which unique column an IntegrityError refers to, if the driver message names it"""
    message = str(error)
    for pattern in _CONSTRAINT_PATTERNS:
        match = pattern.search(message)
        if match is None:
            continue
        key = match.group(1)
        for column, attribute in _UNIQUE_COLUMNS.items():
            if re.search(rf"(?<![A-Za-z]){column}(?![A-Za-z])", key, re.IGNORECASE):
                return attribute
        return None
    return None


class TortoiseUserRepository(UserRepository):
    """
    Tortoise ORM を用いた UserRepository の実装

    ORM の行とプレーンな UserRecordDTO の変換のみを行い、
    ドメインエンティティとの変換は user_record_adapter に委ねる。
    """

    @staticmethod
    def _orm_to_record(orm_user: User) -> UserRecordDTO:
        return UserRecordDTO(
            uuid=orm_user.uuid,
            name=orm_user.name,
            email=orm_user.email,
            password=orm_user.password,
            tag_name=orm_user.tag_name,
            bio=orm_user.bio,
            profile_image=orm_user.profile_image,
            number_of_publications=orm_user.number_of_publications,
            publications=orm_user.publications,
        )

    @asynccontextmanager
    async def _store_errors(self, operation: str):
        try:
            yield
        except IntegrityError:
            raise
        except (DBConnectionError, OperationalError, ConnectionError, asyncio.TimeoutError) as e:
            logger.error(
                "User store unavailable",
                extra={"operation": operation, "error": str(e), "error_type": type(e).__name__},
            )
            raise StoreUnavailableError(str(e)) from e

    async def _find_one(self, operation: str, **criteria) -> Optional[UserEntity]:
        async with self._store_errors(operation):
            orm_user = await User.get_or_none(**criteria)
        if orm_user is None:
            return None
        return record_to_entity(self._orm_to_record(orm_user))

    async def find_by_uuid(self, uuid: UserUuid) -> Optional[UserEntity]:
        """UUIDでユーザーを取得"""
        return await self._find_one("find_by_uuid", uuid=uuid.value)

    async def find_by_email(self, email: Email) -> Optional[UserEntity]:
        """メールアドレスでユーザーを取得"""
        return await self._find_one("find_by_email", email=email.value)

    async def find_by_tag_name(self, tag_name: TagName) -> Optional[UserEntity]:
        """タグ名でユーザーを取得"""
        return await self._find_one("find_by_tag_name", tag_name=tag_name.value)

    async def create(self, user: UserEntity) -> None:
        record = entity_to_record(user)
        try:
            async with self._store_errors("create"):
                await User.create(
                    uuid=record.uuid,
                    name=record.name,
                    email=record.email,
                    password=record.password,
                    tag_name=record.tag_name,
                    bio=record.bio,
                    profile_image=record.profile_image,
                    number_of_publications=record.number_of_publications,
                    publications=record.publications,
                )
        except IntegrityError as e:
            field = conflict_field_from_error(e)
            logger.warning(
                "Unique constraint violated on user insert",
                extra={"field": field, "user_uuid": record.uuid},
            )
            raise UserStoreConflictError(field, str(e)) from e
