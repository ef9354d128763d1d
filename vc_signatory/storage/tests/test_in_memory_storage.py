import pytest

from ..error import StorageDuplicateError, StorageError, StorageNotFoundError
from ..in_memory import InMemoryStorage
from ..record import StorageRecord


@pytest.fixture()
def store():
    yield InMemoryStorage()


def make_record(tags={}):
    return StorageRecord(type="TYPE", value="TEST", tags=tags)


class TestInMemoryStorage:
    @pytest.mark.asyncio
    async def test_add_required(self, store):
        with pytest.raises(StorageError):
            await store.add_record(None)

    @pytest.mark.asyncio
    async def test_add_value_required(self, store):
        with pytest.raises(StorageError):
            await store.add_record(make_record()._replace(value=None))

    @pytest.mark.asyncio
    async def test_retrieve_missing(self, store):
        with pytest.raises(StorageNotFoundError):
            await store.get_record("__MISSING__", "000000000")

    @pytest.mark.asyncio
    async def test_add_retrieve(self, store):
        record = make_record()
        await store.add_record(record)
        result = await store.get_record(record.type, record.id)
        assert result == record

        with pytest.raises(StorageDuplicateError):
            await store.add_record(record)

        with pytest.raises(StorageNotFoundError):
            await store.get_record("OTHER", record.id)

    @pytest.mark.asyncio
    async def test_same_id_other_type(self, store):
        record = make_record()
        await store.add_record(record)
        await store.add_record(record._replace(type="OTHER"))
        assert len(store.records) == 2

    @pytest.mark.asyncio
    async def test_update(self, store):
        record = make_record({"a": "1"})
        with pytest.raises(StorageNotFoundError):
            await store.update_record(record, "NEW", {})

        await store.add_record(record)
        await store.update_record(record, "NEW", {"b": "2"})
        result = await store.get_record(record.type, record.id)
        assert result.value == "NEW"
        assert result.tags == {"b": "2"}

    @pytest.mark.asyncio
    async def test_delete(self, store):
        record = make_record()
        await store.add_record(record)
        await store.delete_record(record)
        with pytest.raises(StorageNotFoundError):
            await store.get_record(record.type, record.id)
        with pytest.raises(StorageNotFoundError):
            await store.delete_record(record)

    @pytest.mark.asyncio
    async def test_find_all(self, store):
        first = make_record({"issuer_id": "did:example:123"})
        second = make_record({"issuer_id": "did:example:456"})
        await store.add_record(first)
        await store.add_record(second)
        await store.add_record(StorageRecord("OTHER", "TEST"))

        assert await store.find_all_records("TYPE") == [first, second]
        assert await store.find_all_records("MISSING") == []
