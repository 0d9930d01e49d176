"""
Slot storage backends
"""
from unittest.mock import MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from hotel.core.errors import PersistenceError
from hotel.db import slots
from hotel.db.session import Base
from hotel.db.slots import MemorySlotStorage, RedisSlotStorage, SqlSlotStorage, build_storage
from hotel.services.auth import AuthGate
from hotel.services.store import HotelStore


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)


class TestMemorySlotStorage:
    def test_roundtrip_and_overwrite(self):
        storage = MemorySlotStorage()
        assert storage.load("hotel_rooms") is None

        storage.save("hotel_rooms", [{"id": "1"}])
        storage.save("hotel_rooms", [{"id": "2"}])
        assert storage.load("hotel_rooms") == [{"id": "2"}]

        storage.delete("hotel_rooms")
        assert storage.load("hotel_rooms") is None

    def test_loaded_values_are_copies(self):
        storage = MemorySlotStorage()
        storage.save("hotel_rooms", [{"id": "1"}])
        storage.load("hotel_rooms").append({"id": "2"})
        assert storage.load("hotel_rooms") == [{"id": "1"}]

    def test_unserializable_value(self):
        with pytest.raises(PersistenceError):
            MemorySlotStorage().save("hotel_rooms", {"when": object()})


class TestSqlSlotStorage:
    def test_roundtrip_and_overwrite(self, session_factory):
        storage = SqlSlotStorage(session_factory)
        assert storage.load("hotel_settings") is None

        storage.save("hotel_settings", {"hotelName": "Hotel Infinity"})
        storage.save("hotel_settings", {"hotelName": "Hotel Infinity Annex"})
        assert storage.load("hotel_settings") == {"hotelName": "Hotel Infinity Annex"}

        storage.delete("hotel_settings")
        assert storage.load("hotel_settings") is None

    def test_store_restart_over_sql(self, session_factory, credentials):
        storage = SqlSlotStorage(session_factory)
        store = HotelStore(storage, auth=AuthGate(storage, credentials))
        store.auth.login("admin@hotelinfinity.com", "admin123")
        store.update_room(store.auth.current_user, "1", {"price": 3900})

        restarted = HotelStore(storage, auth=AuthGate(storage, credentials))
        assert restarted.get_room("1").price == 3900
        assert restarted.list_rooms() == store.list_rooms()
        assert restarted.auth.is_authenticated

    def test_database_errors_become_persistence_errors(self):
        db = MagicMock()
        db.get.side_effect = OperationalError("SELECT", {}, Exception("database is locked"))
        storage = SqlSlotStorage(lambda: db)

        with pytest.raises(PersistenceError):
            storage.save("hotel_rooms", [])
        db.rollback.assert_called_once()
        db.close.assert_called_once()


class TestRedisSlotStorage:
    def test_keys_are_prefixed_json(self):
        client = MagicMock()
        client.get.return_value = '[{"id": "1"}]'
        storage = RedisSlotStorage(client, prefix="hotel:")

        storage.save("hotel_rooms", [{"id": "1"}])
        client.set.assert_called_once_with("hotel:hotel_rooms", '[{"id": "1"}]')

        assert storage.load("hotel_rooms") == [{"id": "1"}]
        client.get.assert_called_once_with("hotel:hotel_rooms")

        storage.delete(slots.SESSION)
        client.delete.assert_called_once_with("hotel:currentUser")

    def test_missing_key(self):
        client = MagicMock()
        client.get.return_value = None
        assert RedisSlotStorage(client).load("hotel_rooms") is None

    def test_redis_errors_become_persistence_errors(self):
        client = MagicMock()
        client.set.side_effect = RedisConnectionError("connection refused")
        client.get.side_effect = RedisConnectionError("connection refused")
        storage = RedisSlotStorage(client)

        with pytest.raises(PersistenceError):
            storage.save("hotel_rooms", [])
        with pytest.raises(PersistenceError):
            storage.load("hotel_rooms")

    def test_corrupt_value(self):
        client = MagicMock()
        client.get.return_value = "{not json"
        with pytest.raises(PersistenceError):
            RedisSlotStorage(client).load("hotel_rooms")


def test_build_storage():
    assert isinstance(build_storage("memory"), MemorySlotStorage)
    with pytest.raises(PersistenceError):
        build_storage("floppy")
