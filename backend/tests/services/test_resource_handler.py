"""Resource Handler — status mapping over a fake store.

Invariants:
    - Identifier failures never reach the store
    - StoreResult errors become StoreError with the same message
    - Zero rows / zero affected become ResourceNotFoundError
    - Delete re-lists the table after a successful delete
"""

import pytest

from rental_api.core.errors import (
    InvalidIdentifierError, InvalidInputError, ResourceNotFoundError, StoreError,
)
from rental_api.core.store_result import StoreResult
from rental_api.schemas.user import UserPayload
from rental_api.services.resource_handler import ResourceHandler
from rental_api.services.resource_registry import CARS, USERS


class _FakeStore:
    """Records every call and answers from a queue of StoreResults."""

    def __init__(self, *results):
        self.calls = []
        self._results = list(results)

    def _next(self, name, *args):
        self.calls.append((name, *args))
        return self._results.pop(0)

    async def fetch_all(self, table):
        return self._next("fetch_all", table.name)

    async def fetch_where(self, table, column, value):
        return self._next("fetch_where", table.name, column, value)

    async def insert(self, table, values):
        return self._next("insert", table.name, values)

    async def update(self, table, id_column, record_id, values):
        return self._next("update", table.name, id_column, record_id, values)

    async def delete(self, table, id_column, record_id):
        return self._next("delete", table.name, id_column, record_id)


USER = UserPayload(Name="Ada", Email="ada@example.com", Password="pw")


async def test_get_invalid_id_skips_store():
    store = _FakeStore()
    with pytest.raises(InvalidIdentifierError) as exc:
        await ResourceHandler(CARS, store).get("abc")
    assert exc.value.message == "Invalid car ID"
    assert store.calls == []


async def test_update_invalid_id_is_invalid_input():
    store = _FakeStore()
    with pytest.raises(InvalidInputError):
        await ResourceHandler(USERS, store).update("abc", USER)
    assert store.calls == []


async def test_get_parses_id_before_querying():
    store = _FakeStore(StoreResult(rows=[{"CarID": 12}]))
    assert await ResourceHandler(CARS, store).get("12abc") == {"CarID": 12}
    assert store.calls == [("fetch_where", "Cars", "CarID", 12)]


async def test_get_not_found():
    with pytest.raises(ResourceNotFoundError) as exc:
        await ResourceHandler(CARS, _FakeStore(StoreResult())).get("3")
    assert exc.value.record_id == 3


async def test_store_failure_message_passes_through():
    store = _FakeStore(StoreResult.failure("ER_NO_SUCH_TABLE: Table 'Cars' doesn't exist"))
    with pytest.raises(StoreError) as exc:
        await ResourceHandler(CARS, store).list_all()
    assert exc.value.to_response() == {
        "error": "ER_NO_SUCH_TABLE: Table 'Cars' doesn't exist",
    }


async def test_create_echoes_with_generated_id():
    store = _FakeStore(StoreResult(affected=1, inserted_id=5))
    created = await ResourceHandler(USERS, store).create(USER)
    assert created == {"UserID": 5, **USER.model_dump()}


async def test_update_zero_affected_is_not_found():
    store = _FakeStore(StoreResult(affected=0))
    with pytest.raises(ResourceNotFoundError):
        await ResourceHandler(USERS, store).update("8", USER)


async def test_update_echoes_input_without_rereading():
    store = _FakeStore(StoreResult(affected=1))
    updated = await ResourceHandler(USERS, store).update("8", USER)
    assert updated == {"UserID": 8, **USER.model_dump()}
    assert [c[0] for c in store.calls] == ["update"]


async def test_delete_relists_table():
    remaining = [{"CarID": 1}]
    store = _FakeStore(StoreResult(affected=1), StoreResult(rows=remaining))
    assert await ResourceHandler(CARS, store).delete("2") == remaining
    assert [c[0] for c in store.calls] == ["delete", "fetch_all"]


async def test_delete_not_found_does_not_relist():
    store = _FakeStore(StoreResult(affected=0))
    with pytest.raises(ResourceNotFoundError):
        await ResourceHandler(CARS, store).delete("2")
    assert len(store.calls) == 1


async def test_list_where_uses_given_label():
    with pytest.raises(InvalidIdentifierError) as exc:
        await ResourceHandler(CARS, _FakeStore()).list_where("UserID", "x", id_label="User")
    assert exc.value.message == "Invalid user ID"


async def test_redaction_drops_hidden_fields():
    store = _FakeStore(StoreResult(affected=1, inserted_id=1))
    created = await ResourceHandler(USERS, store, redact=True).create(USER)
    assert created == {"UserID": 1, "Name": "Ada", "Email": "ada@example.com"}


@pytest.mark.parametrize("method", ["get", "delete"])
async def test_id_beyond_key_range_is_not_found_without_store(method):
    store = _FakeStore()
    with pytest.raises(ResourceNotFoundError):
        await getattr(ResourceHandler(CARS, store), method)(str(2 ** 63))
    assert store.calls == []


async def test_update_id_beyond_key_range_is_not_found_without_store():
    store = _FakeStore()
    with pytest.raises(ResourceNotFoundError):
        await ResourceHandler(USERS, store).update(str(-(2 ** 63) - 1), USER)
    assert store.calls == []


async def test_list_where_beyond_key_range_is_empty_without_store():
    store = _FakeStore()
    assert await ResourceHandler(CARS, store).list_where("UserID", "1" * 30, id_label="User") == []
    assert store.calls == []
