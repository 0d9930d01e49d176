"""Slot storage: durable read/write of whole collections under a name.

Every backend stores one JSON document per slot and overwrites it on save.
Backend failures surface as ``PersistenceError``.
"""
import json
from typing import Any, Optional

from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError

from hotel.core.config import STORAGE_BACKEND, REDIS_KEY_PREFIX
from hotel.core.errors import PersistenceError
from hotel.core.logging_config import get_logger
from hotel.models.slot import StorageSlot

logger = get_logger()

# Slot names
ROOMS = "hotel_rooms"
HALLS = "hotel_halls"
REVIEWS = "hotel_reviews"
BOOKINGS = "hotel_bookings"
PAYMENTS = "hotel_payments"
SETTINGS = "hotel_settings"
SESSION = "currentUser"
SCHEMA_VERSION = "hotel_schema_version"


def _encode(key: str, value: Any) -> str:
    try:
        return json.dumps(value)
    except (TypeError, ValueError) as e:
        raise PersistenceError(f"Slot {key} is not serializable: {e}", keys=[key]) from e


def _decode(key: str, raw: Optional[str]) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError as e:
        raise PersistenceError(f"Slot {key} holds corrupt data: {e}", keys=[key]) from e


class SlotStorage:
    def load(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def save(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class MemorySlotStorage(SlotStorage):
    """Keeps encoded JSON in a dict, so loads never share objects with the caller."""

    def __init__(self):
        self.slots: dict[str, str] = {}

    def load(self, key):
        return _decode(key, self.slots.get(key))

    def save(self, key, value):
        self.slots[key] = _encode(key, value)

    def delete(self, key):
        self.slots.pop(key, None)


class SqlSlotStorage(SlotStorage):
    def __init__(self, session_factory):
        self.session_factory = session_factory

    def load(self, key):
        db = self.session_factory()
        try:
            slot = db.get(StorageSlot, key)
            return _decode(key, slot.value if slot else None)
        except SQLAlchemyError as e:
            logger.error(f"Slot load failed | key={key} | {e}")
            raise PersistenceError(f"Could not load slot {key}", keys=[key]) from e
        finally:
            db.close()

    def save(self, key, value):
        raw = _encode(key, value)
        db = self.session_factory()
        try:
            slot = db.get(StorageSlot, key)
            if slot is None:
                db.add(StorageSlot(key=key, value=raw))
            else:
                slot.value = raw
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Slot save failed | key={key} | {e}")
            raise PersistenceError(f"Could not save slot {key}", keys=[key]) from e
        finally:
            db.close()

    def delete(self, key):
        db = self.session_factory()
        try:
            db.query(StorageSlot).filter(StorageSlot.key == key).delete()
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Slot delete failed | key={key} | {e}")
            raise PersistenceError(f"Could not delete slot {key}", keys=[key]) from e
        finally:
            db.close()


class RedisSlotStorage(SlotStorage):
    def __init__(self, client, prefix: str = REDIS_KEY_PREFIX):
        self.client = client
        self.prefix = prefix

    def _key(self, key):
        return f"{self.prefix}{key}"

    def load(self, key):
        try:
            raw = self.client.get(self._key(key))
        except RedisError as e:
            logger.error(f"Slot load failed | key={key} | {e}")
            raise PersistenceError(f"Could not load slot {key}", keys=[key]) from e
        return _decode(key, raw)

    def save(self, key, value):
        raw = _encode(key, value)
        try:
            self.client.set(self._key(key), raw)
        except RedisError as e:
            logger.error(f"Slot save failed | key={key} | {e}")
            raise PersistenceError(f"Could not save slot {key}", keys=[key]) from e

    def delete(self, key):
        try:
            self.client.delete(self._key(key))
        except RedisError as e:
            logger.error(f"Slot delete failed | key={key} | {e}")
            raise PersistenceError(f"Could not delete slot {key}", keys=[key]) from e


def build_storage(backend: str = STORAGE_BACKEND) -> SlotStorage:
    if backend == "memory":
        return MemorySlotStorage()

    if backend == "redis":
        from hotel.core.redis import get_redis_client
        return RedisSlotStorage(get_redis_client())

    if backend == "sql":
        from hotel.db.session import Base, SessionLocal, engine
        Base.metadata.create_all(bind=engine)
        return SqlSlotStorage(SessionLocal)

    raise PersistenceError(f"Unknown storage backend: {backend}")
