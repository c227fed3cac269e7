from typing import Optional

from ...port.user_repository import UserRepository
from ...port.dto.user_dto import CreateUserDTO
from ...domain.entity.user_entity import UserEntity
from ...domain.exception.user_exceptions import (
    DuplicateEmailError,
    DuplicateIdentifierError,
    DuplicateTagNameError,
    UserAlreadyExistsError,
    UserStoreConflictError,
)
from ...infra.logging_config import get_logger

logger = get_logger("usecase.register_user")


class RegisterUserUseCase:
    """
    ユーザー登録のユースケース実装

    検証済みエンティティを生成し、ID・メールアドレス・タグ名の順に
    一意性を確認してから一度だけ永続化する。確認と挿入は同一トランザクション
    ではないため、挿入時の一意制約違反も重複エラーとして扱う。
    """
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, user_dto: CreateUserDTO) -> UserEntity:
        new_user = UserEntity.create_user(
            uuid=user_dto.uuid,
            name=user_dto.name,
            email=user_dto.email,
            password=user_dto.password,
            tag_name=user_dto.tag_name,
            bio=user_dto.bio,
            profile_image=user_dto.profile_image,
            number_of_publications=user_dto.number_of_publications,
            publications=user_dto.publications,
        )

        if await self.user_repository.find_by_uuid(new_user.uuid) is not None:
            self._reject(DuplicateIdentifierError(new_user.uuid.value))

        if await self.user_repository.find_by_email(new_user.email) is not None:
            self._reject(DuplicateEmailError(new_user.email.value))

        if await self.user_repository.find_by_tag_name(new_user.tag_name) is not None:
            self._reject(DuplicateTagNameError(new_user.tag_name.value))

        try:
            await self.user_repository.create(new_user)
        except UserStoreConflictError as e:
            # 確認後に他のリクエストが同じ値で登録した場合
            self._reject(self._conflict_to_duplicate(e, new_user), cause=e)

        logger.info(
            "User registered",
            extra={"user_uuid": new_user.uuid.value, "tag_name": new_user.tag_name.value},
        )
        return new_user

    @staticmethod
    def _conflict_to_duplicate(
        conflict: UserStoreConflictError, user: UserEntity
    ) -> UserAlreadyExistsError:
        if conflict.field == "uuid":
            return DuplicateIdentifierError(user.uuid.value)
        if conflict.field == "email":
            return DuplicateEmailError(user.email.value)
        if conflict.field == "tag_name":
            return DuplicateTagNameError(user.tag_name.value)
        return UserAlreadyExistsError(str(conflict))

    @staticmethod
    def _reject(error: UserAlreadyExistsError, cause: Optional[Exception] = None):
        logger.warning(
            "User registration rejected",
            extra={"error_code": error.error_code, "error": str(error)},
        )
        raise error from cause
