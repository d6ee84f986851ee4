"""User Factory — fabrication and validation of mock users.

Tests cover:
    - Fixed sample list (two records, stable values)
    - Constant created id regardless of payload
    - Zero id rejection across fabricate/update/check
    - Empty name/email rejection on create and update
"""

import pytest

from crud_api.core import user_factory
from crud_api.core.domain_types import CREATED_USER_ID
from crud_api.core.errors import InvalidFieldError, InvalidIdentifierError
from crud_api.schemas.user import UserPayload


def _payload(**overrides) -> UserPayload:
    data = {"name": "Ada", "email": "ada@example.com", "age": 36}
    data.update(overrides)
    return UserPayload(**data)


def test_sample_users_are_john_and_jane():
    users = user_factory.sample_users()
    assert [(u.id, u.name, u.age) for u in users] == [
        (1, "John Doe", 30), (2, "Jane Doe", 25),
    ]
    assert all(u.email == user_factory.SAMPLE_EMAIL for u in users)


def test_created_user_always_gets_constant_id():
    first = user_factory.build_created_user(_payload())
    second = user_factory.build_created_user(_payload(name="Grace"))
    assert first.id == second.id == CREATED_USER_ID == 44


def test_created_user_echoes_payload_fields():
    user = user_factory.build_created_user(_payload(age=0))
    assert (user.name, user.email, user.age) == ("Ada", "ada@example.com", 0)


@pytest.mark.parametrize("field_name", ["name", "email"])
def test_create_rejects_empty_required_field(field_name):
    with pytest.raises(InvalidFieldError) as exc_info:
        user_factory.build_created_user(_payload(**{field_name: ""}))
    assert exc_info.value.field_name == field_name
    assert exc_info.value.http_status == 400


def test_fabricate_user_is_derived_from_id():
    user = user_factory.fabricate_user(7)
    assert user.id == 7
    assert user.name == "User 7"
    assert user.email == "user7@example.com"
    assert user.age == 30


def test_fabricate_user_rejects_zero():
    with pytest.raises(InvalidIdentifierError):
        user_factory.fabricate_user(0)


def test_update_keeps_path_id_and_payload():
    user = user_factory.build_updated_user(3, _payload(name="Linus", age=55))
    assert user.id == 3
    assert user.name == "Linus"
    assert user.age == 55


def test_update_checks_id_before_payload():
    with pytest.raises(InvalidIdentifierError):
        user_factory.build_updated_user(0, _payload(name=""))


@pytest.mark.parametrize("field_name", ["name", "email"])
def test_update_rejects_empty_required_field(field_name):
    with pytest.raises(InvalidFieldError):
        user_factory.build_updated_user(5, _payload(**{field_name: ""}))


def test_check_user_id_passes_positive_through():
    assert user_factory.check_user_id(12) == 12
