"""User Service — transaction scoping and error translation over the real repository.

Invariants:
    - save assigns ids on insert and overwrites by id on update
    - save with an unknown id inserts it (upsert)
    - Duplicate email rolls back and raises EmailConflictError; session stays usable
    - delete of a missing id is a no-op
    - Every operation leaves the session outside a transaction
"""

import pytest
from sqlalchemy import select

from users_api.core.domain_types import UserId
from users_api.core.errors import EmailConflictError
from users_api.models.user import User
from users_api.repositories.user_repository import SqlAlchemyUserRepository
from users_api.services.user_service import UserService


@pytest.fixture
def service(test_db):
    return UserService(test_db, SqlAlchemyUserRepository(test_db))


async def test_save_assigns_id_and_commits(service, test_db):
    user = await service.save(User(name="Ana", email="ana@x.com", password="p1"))

    assert user.id is not None
    assert not test_db.in_transaction()
    test_db.expunge_all()
    assert (await service.user_by_id(UserId(user.id))).email == "ana@x.com"


async def test_get_all_returns_users_in_id_order(service):
    for name in ("C", "A", "B"):
        await service.save(User(name=name, email=f"{name}@x.com", password="p"))

    users = await service.get_all()

    assert [u.name for u in users] == ["C", "A", "B"]
    assert [u.id for u in users] == sorted(u.id for u in users)


async def test_user_by_id_missing_returns_none(service):
    assert await service.user_by_id(UserId(123)) is None


async def test_save_existing_user_overwrites_fields(service):
    user = await service.save(User(name="Ana", email="ana@x.com", password="p1"))
    user.name, user.password = "Ana B", "p2"

    await service.save(user)

    fetched = await service.user_by_id(UserId(user.id))
    assert (fetched.id, fetched.name, fetched.password) == (user.id, "Ana B", "p2")


async def test_save_with_unknown_id_inserts_row(service):
    saved = await service.save(
        User(id=42, name="Zed", email="zed@x.com", password="p"),
    )

    assert saved.id == 42
    assert (await service.user_by_id(UserId(42))).email == "zed@x.com"


async def test_duplicate_email_raises_conflict_and_rolls_back(service):
    await service.save(User(name="A", email="same@x.com", password="p"))

    with pytest.raises(EmailConflictError) as exc_info:
        await service.save(User(name="B", email="same@x.com", password="p"))

    assert exc_info.value.http_status == 409
    assert exc_info.value.email == "same@x.com"
    users = await service.get_all()
    assert [u.name for u in users] == ["A"]


async def test_delete_removes_user(service):
    user = await service.save(User(name="Ana", email="ana@x.com", password="p"))

    await service.delete(UserId(user.id))

    assert await service.user_by_id(UserId(user.id)) is None
    assert await service.get_all() == []


async def test_delete_missing_user_is_noop(service):
    await service.save(User(name="Ana", email="ana@x.com", password="p"))

    await service.delete(UserId(999))

    assert len(await service.get_all()) == 1


async def test_operations_take_over_autobegun_transaction(service, test_db):
    await test_db.execute(select(User))
    assert test_db.in_transaction()

    await service.save(User(name="Ana", email="ana@x.com", password="p"))

    assert not test_db.in_transaction()
    assert len(await service.get_all()) == 1
    assert not test_db.in_transaction()
