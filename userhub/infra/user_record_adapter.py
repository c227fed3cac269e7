"""
Mapping between persisted user records and the user domain entity
"""
from ..domain.entity.user_entity import UserEntity
from ..domain.value_object.user_values import (
    Bio,
    Email,
    Password,
    ProfileImage,
    TagName,
    UserName,
    UserUuid,
)
from ..port.dto.user_dto import UserRecordDTO


def record_to_entity(record: UserRecordDTO) -> UserEntity:
    """Convert a stored record to a domain entity"""
    return UserEntity(
        uuid=UserUuid(record.uuid),
        name=UserName(record.name),
        email=Email(record.email),
        password=Password(record.password),
        tag_name=TagName(record.tag_name),
        bio=Bio(record.bio or ""),
        profile_image=ProfileImage(record.profile_image or ""),
        number_of_publications=record.number_of_publications,
        publications=tuple(record.publications or ()),
    )


def entity_to_record(user: UserEntity) -> UserRecordDTO:
    """Convert a domain entity to a plain record"""
    return UserRecordDTO(
        uuid=user.uuid.value,
        name=user.name.value,
        email=user.email.value,
        password=user.password.value,
        tag_name=user.tag_name.value,
        bio=user.bio.value,
        profile_image=user.profile_image.value,
        number_of_publications=user.number_of_publications,
        publications=list(user.publications),
    )
