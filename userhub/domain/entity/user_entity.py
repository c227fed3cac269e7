from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from ..exception.user_exceptions import InvalidFieldError
from ..value_object.user_values import (
    Bio,
    Email,
    Password,
    ProfileImage,
    TagName,
    UserName,
    UserUuid,
)


def _validate_number_of_publications(value) -> int:
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFieldError("number_of_publications", "must be an integer")
    if value < 0:
        raise InvalidFieldError("number_of_publications", "must be zero or greater")
    return value


def _validate_publications(value) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise InvalidFieldError("publications", "must be a list")
    for reference in value:
        if not isinstance(reference, str) or not reference.strip():
            raise InvalidFieldError("publications", "references must be non-empty strings")
    return tuple(value)


@dataclass(frozen=True)
class UserEntity:
    """
    ユーザーのビジネスドメインモデル

    各フィールドは値オブジェクトで保持され、生成時点で検証済みとなる。
    """
    uuid: UserUuid
    name: UserName
    email: Email
    password: Password
    tag_name: TagName
    bio: Bio = field(default_factory=Bio)
    profile_image: ProfileImage = field(default_factory=ProfileImage)
    number_of_publications: int = 0
    publications: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(
            self,
            "number_of_publications",
            _validate_number_of_publications(self.number_of_publications),
        )
        object.__setattr__(self, "publications", _validate_publications(self.publications))

    @classmethod
    def create_user(
        cls,
        uuid: str,
        name: str,
        email: str,
        password: str,
        tag_name: str,
        bio: Optional[str] = None,
        profile_image: Optional[str] = None,
        number_of_publications: int = 0,
        publications: Optional[Iterable[str]] = None,
    ) -> "UserEntity":
        """生の入力値から検証済みのユーザーを生成する。不正な値は InvalidFieldError。"""
        return cls(
            uuid=UserUuid(uuid),
            name=UserName(name),
            email=Email(email),
            password=Password(password),
            tag_name=TagName(tag_name),
            bio=Bio(bio),
            profile_image=ProfileImage(profile_image),
            number_of_publications=number_of_publications,
            publications=publications if publications is not None else (),
        )
