import pytest

from userhub.domain.entity.user_entity import UserEntity
from userhub.domain.exception.user_exceptions import InvalidFieldError
from userhub.infra.user_record_adapter import entity_to_record, record_to_entity
from userhub.port.dto.user_dto import UserRecordDTO


def _create(**overrides):
    values = dict(
        uuid="u1",
        name="Alice",
        email="a@x.com",
        password="p",
        tag_name="alice",
    )
    values.update(overrides)
    return UserEntity.create_user(**values)


class TestUserEntity:
    """ユーザーエンティティ生成のテスト"""

    def test_create_user_with_required_fields_only(self):
        user = _create()

        assert user.uuid.value == "u1"
        assert user.name.value == "Alice"
        assert user.email.value == "a@x.com"
        assert user.password.value == "p"
        assert user.tag_name.value == "alice"
        assert user.bio.value == ""
        assert user.profile_image.value == ""
        assert user.number_of_publications == 0
        assert user.publications == ()

    def test_create_user_keeps_publication_order(self):
        user = _create(publications=["pub-2", "pub-1"], number_of_publications=2)
        assert user.publications == ("pub-2", "pub-1")

    @pytest.mark.parametrize("value", [-1, 1.5, "3", True])
    def test_number_of_publications_must_be_non_negative_int(self, value):
        with pytest.raises(InvalidFieldError) as exc_info:
            _create(number_of_publications=value)
        assert exc_info.value.field == "number_of_publications"

    @pytest.mark.parametrize("value", ["pub-1", [""], [1], {"a": 1}])
    def test_publications_must_be_list_of_references(self, value):
        with pytest.raises(InvalidFieldError) as exc_info:
            _create(publications=value)
        assert exc_info.value.field == "publications"

    def test_first_invalid_field_is_reported(self):
        with pytest.raises(InvalidFieldError) as exc_info:
            _create(email="not-an-email", tag_name="bad tag")
        assert exc_info.value.field == "email"

    def test_entity_is_immutable(self):
        user = _create()
        with pytest.raises(AttributeError):
            user.number_of_publications = 3


class TestUserRecordAdapter:
    """レコードとエンティティの変換テスト"""

    def test_missing_optional_fields_become_empty_strings(self):
        record = UserRecordDTO(
            uuid="u1",
            name="Alice",
            email="a@x.com",
            password="p",
            tag_name="alice",
            bio=None,
            profile_image=None,
            number_of_publications=0,
            publications=None,
        )

        user = record_to_entity(record)

        assert user.bio.value == ""
        assert user.profile_image.value == ""
        assert user.publications == ()

    def test_entity_to_record_unwraps_values(self):
        user = _create(bio="hello", profile_image="https://img/a.png",
                       number_of_publications=1, publications=["pub-1"])

        record = entity_to_record(user)

        assert record == UserRecordDTO(
            uuid="u1",
            name="Alice",
            email="a@x.com",
            password="p",
            tag_name="alice",
            bio="hello",
            profile_image="https://img/a.png",
            number_of_publications=1,
            publications=["pub-1"],
        )

    def test_entity_to_record_never_emits_none(self):
        record = entity_to_record(_create())
        assert record.bio == ""
        assert record.profile_image == ""
        assert record.publications == []

    def test_record_round_trip_preserves_entity(self):
        user = _create(bio="bio", publications=["pub-1", "pub-2"], number_of_publications=2)
        assert record_to_entity(entity_to_record(user)) == user
