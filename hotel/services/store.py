"""Entity store: the in-memory owner of every hotel collection.

All public reads and every mutation go through ``HotelStore``. Each mutation
validates its input, updates memory, runs cascade rules, then rewrites the
affected slots. Admin mutations take the caller's session and are checked by
the ``AuthGate``.
"""
import uuid
from collections import OrderedDict
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable, Iterable, Mapping, Optional, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from hotel.core.errors import EntityNotFoundError, PersistenceError, ValidationError
from hotel.core.logging_config import get_logger
from hotel.db import slots
from hotel.db.slots import SlotStorage
from hotel.models.enums import BookingStatus, BookingType, PaymentMethod
from hotel.schemas.booking import Booking, BookingCreate
from hotel.schemas.hall import HallCreate, PartyHall
from hotel.schemas.payment import Payment, PaymentCreate
from hotel.schemas.review import Review, ReviewCreate
from hotel.schemas.room import Room, RoomCreate
from hotel.schemas.settings import HotelSettings
from hotel.schemas.user import User
from hotel.services.auth import AuthGate
from hotel.services.seed import SEED_HALLS, SEED_REVIEWS, SEED_ROOMS, SEED_SETTINGS

logger = get_logger()

SCHEMA_VERSION = 1

# Fields the store assigns itself; never taken from callers
MANAGED_FIELDS = {"id", "created_at", "updated_at"}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return uuid.uuid4().hex


def _as_dict(data: Any) -> dict:
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=True)
    if isinstance(data, Mapping):
        return dict(data)
    raise ValidationError(f"Expected a mapping, got {type(data).__name__}")


def _field_names(model: Type[BaseModel], data: dict) -> dict:
    """Map camelCase or snake_case keys onto model field names."""
    by_alias = {to_camel(name): name for name in model.model_fields}
    out = {}
    for key, value in data.items():
        name = by_alias.get(key, key)
        if name not in model.model_fields:
            raise ValidationError(f"Unknown field '{key}' for {model.__name__}")
        out[name] = value
    return out


def _validate(model: Type[BaseModel], data: dict):
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or model.__name__}: {err['msg']}"
            for err in e.errors()
        )
        raise ValidationError(f"Invalid {model.__name__}: {errors}") from e


class Collection:
    """Records keyed by id, with a visible order (appended or newest-first)."""

    def __init__(self, key: str, model: Type[BaseModel], newest_first: bool = False):
        self.key = key
        self.model = model
        self.newest_first = newest_first
        self._items: "OrderedDict[str, Any]" = OrderedDict()

    def load(self, rows: Iterable[dict]):
        self._items.clear()
        for row in rows:
            try:
                item = self.model.model_validate(row)
            except PydanticValidationError as e:
                raise PersistenceError(f"Slot {self.key} holds invalid records: {e}", keys=[self.key]) from e
            self._items[item.id] = item

    def insert(self, item):
        self._items[item.id] = item
        if self.newest_first:
            self._items.move_to_end(item.id, last=False)

    def replace(self, item):
        # keeps the record's position
        self._items[item.id] = item

    def get(self, item_id: str):
        return self._items.get(item_id)

    def pop(self, item_id: str):
        return self._items.pop(item_id, None)

    def values(self) -> list:
        return list(self._items.values())

    def dump(self) -> list[dict]:
        return [item.to_slot() for item in self._items.values()]

    def __len__(self):
        return len(self._items)

    def __contains__(self, item_id):
        return item_id in self._items


class HotelStore:
    def __init__(
        self,
        storage: SlotStorage,
        auth: Optional[AuthGate] = None,
        clock: Callable[[], datetime] = utcnow,
        id_factory: Callable[[], str] = new_id,
    ):
        self.storage = storage
        self.auth = auth or AuthGate(storage)
        self.clock = clock
        self.id_factory = id_factory

        self.rooms = Collection(slots.ROOMS, Room)
        self.halls = Collection(slots.HALLS, PartyHall)
        self.reviews = Collection(slots.REVIEWS, Review, newest_first=True)
        self.bookings = Collection(slots.BOOKINGS, Booking, newest_first=True)
        self.payments = Collection(slots.PAYMENTS, Payment, newest_first=True)
        self.settings: HotelSettings = HotelSettings.model_validate(SEED_SETTINGS)

        # Slots whose last save failed; retried by flush()
        self._dirty: set[str] = set()

        self.reload()

    # =====================================================================
    # PERSISTENCE
    # =====================================================================
    def _collections(self) -> dict[str, Collection]:
        return {c.key: c for c in (self.rooms, self.halls, self.reviews, self.bookings, self.payments)}

    def reload(self):
        """(Re)build memory from storage, seeding slots that were never written."""
        version = self.storage.load(slots.SCHEMA_VERSION)
        if version is not None and version > SCHEMA_VERSION:
            raise PersistenceError(
                f"Stored schema version {version} is newer than supported {SCHEMA_VERSION}",
                keys=[slots.SCHEMA_VERSION],
            )

        seeds = {
            slots.ROOMS: SEED_ROOMS,
            slots.HALLS: SEED_HALLS,
            slots.REVIEWS: SEED_REVIEWS,
            slots.BOOKINGS: [],
            slots.PAYMENTS: [],
        }
        for key, collection in self._collections().items():
            rows = self.storage.load(key)
            collection.load(seeds[key] if rows is None else rows)

        saved_settings = self.storage.load(slots.SETTINGS)
        try:
            self.settings = HotelSettings.model_validate(saved_settings or SEED_SETTINGS)
        except PydanticValidationError as e:
            raise PersistenceError(f"Slot {slots.SETTINGS} holds invalid settings: {e}", keys=[slots.SETTINGS]) from e

        self._dirty.clear()
        keys = [*self._collections(), slots.SETTINGS]
        if version != SCHEMA_VERSION:
            keys.append(slots.SCHEMA_VERSION)
        try:
            self._persist(*keys)
        except PersistenceError as e:
            # Loaded state is usable; failed slots stay dirty until flush()
            logger.warning(f"Start-up write-back incomplete | slots={e.keys}")
        else:
            if version != SCHEMA_VERSION:
                logger.info(f"Storage migrated to schema version {SCHEMA_VERSION}")

    def _payload(self, key: str):
        if key == slots.SETTINGS:
            return self.settings.to_slot()
        if key == slots.SCHEMA_VERSION:
            return SCHEMA_VERSION
        return self._collections()[key].dump()

    def _persist(self, *keys: str):
        failed = []
        for key in keys:
            try:
                self.storage.save(key, self._payload(key))
                self._dirty.discard(key)
            except PersistenceError as e:
                self._dirty.add(key)
                failed.append(key)
                logger.error(f"Persist failed, memory stays authoritative | slot={key} | {e.message}")
        if failed:
            raise PersistenceError(f"Could not persist {', '.join(failed)}", keys=failed)

    @property
    def dirty_slots(self) -> set[str]:
        return set(self._dirty)

    def flush(self):
        """Retry every slot whose last save failed."""
        if self._dirty:
            self._persist(*sorted(self._dirty))

    # =====================================================================
    # GENERIC HELPERS
    # =====================================================================
    def _stamp(self, previous: Optional[datetime] = None) -> datetime:
        now = self.clock()
        if previous is not None and now <= previous:
            now = previous + timedelta(microseconds=1)
        return now

    def _create(self, create_model: Type[BaseModel], model: Type[BaseModel], data: Any, **assigned):
        fields = _field_names(model, _as_dict(data))
        for name in MANAGED_FIELDS | set(assigned):
            fields.pop(name, None)
        _validate(create_model, fields)

        now = self._stamp()
        return _validate(model, {**fields, **assigned, "id": self.id_factory(), "created_at": now, "updated_at": now})

    def _patch(self, collection: Collection, item_id: str, patch: Any):
        current = collection.get(item_id)
        if current is None:
            return None

        fields = _field_names(collection.model, _as_dict(patch))
        touched = MANAGED_FIELDS & set(fields)
        if touched:
            raise ValidationError(f"Cannot change {', '.join(sorted(touched))}")

        data = current.model_dump()
        data.update(fields)
        data["updated_at"] = self._stamp(current.updated_at)
        updated = _validate(collection.model, data)

        collection.replace(updated)
        return updated

    # =====================================================================
    # ROOMS
    # =====================================================================
    def list_rooms(self) -> list[Room]:
        return self.rooms.values()

    def get_room(self, room_id: str) -> Optional[Room]:
        return self.rooms.get(room_id)

    def add_room(self, caller: Optional[User], data) -> Room:
        self.auth.require_admin(caller)
        room = self._create(RoomCreate, Room, data)
        self.rooms.insert(room)
        logger.bind(log_type="admin").info(f"Room added | id={room.id} | {room.name}")
        self._persist(slots.ROOMS)
        return room

    def update_room(self, caller: Optional[User], room_id: str, patch) -> Optional[Room]:
        self.auth.require_admin(caller)
        room = self._patch(self.rooms, room_id, patch)
        if room is None:
            return None
        logger.bind(log_type="admin").info(f"Room updated | id={room_id}")
        self._persist(slots.ROOMS)
        return room

    def delete_room(self, caller: Optional[User], room_id: str) -> bool:
        self.auth.require_admin(caller)
        if self.rooms.pop(room_id) is None:
            return False
        cancelled = self._cancel_pending_for(room_id=room_id)
        logger.bind(log_type="admin").info(f"Room deleted | id={room_id} | cancelled_bookings={cancelled}")
        self._persist(slots.ROOMS, slots.BOOKINGS)
        return True

    # =====================================================================
    # PARTY HALLS
    # =====================================================================
    def list_halls(self) -> list[PartyHall]:
        return self.halls.values()

    def get_hall(self, hall_id: str) -> Optional[PartyHall]:
        return self.halls.get(hall_id)

    def add_hall(self, caller: Optional[User], data) -> PartyHall:
        self.auth.require_admin(caller)
        hall = self._create(HallCreate, PartyHall, data)
        self.halls.insert(hall)
        logger.bind(log_type="admin").info(f"Hall added | id={hall.id} | {hall.name}")
        self._persist(slots.HALLS)
        return hall

    def update_hall(self, caller: Optional[User], hall_id: str, patch) -> Optional[PartyHall]:
        self.auth.require_admin(caller)
        hall = self._patch(self.halls, hall_id, patch)
        if hall is None:
            return None
        logger.bind(log_type="admin").info(f"Hall updated | id={hall_id}")
        self._persist(slots.HALLS)
        return hall

    def delete_hall(self, caller: Optional[User], hall_id: str) -> bool:
        self.auth.require_admin(caller)
        if self.halls.pop(hall_id) is None:
            return False
        cancelled = self._cancel_pending_for(hall_id=hall_id)
        logger.bind(log_type="admin").info(f"Hall deleted | id={hall_id} | cancelled_bookings={cancelled}")
        self._persist(slots.HALLS, slots.BOOKINGS)
        return True

    def _cancel_pending_for(self, room_id: Optional[str] = None, hall_id: Optional[str] = None) -> int:
        """Cancel pending bookings of a deleted room or hall; others keep their reference."""
        cancelled = 0
        for booking in self.bookings.values():
            if booking.status != BookingStatus.PENDING:
                continue
            if (room_id and booking.room_id == room_id) or (hall_id and booking.hall_id == hall_id):
                self._patch(self.bookings, booking.id, {"status": BookingStatus.CANCELLED})
                cancelled += 1
        return cancelled

    # =====================================================================
    # REVIEWS
    # =====================================================================
    def all_reviews(self) -> list[Review]:
        return self.reviews.values()

    def get_review(self, review_id: str) -> Optional[Review]:
        return self.reviews.get(review_id)

    def add_review(self, data, today: Optional[date] = None) -> Review:
        """Public submission; always starts unapproved."""
        review = self._create(
            ReviewCreate, Review, data,
            approved=False,
            date=today or self.clock().date(),
        )
        self.reviews.insert(review)
        logger.bind(log_type="admin").info(f"Review submitted | id={review.id} | rating={review.rating}")
        self._persist(slots.REVIEWS)
        return review

    def update_review(self, caller: Optional[User], review_id: str, patch) -> Optional[Review]:
        self.auth.require_admin(caller)
        review = self._patch(self.reviews, review_id, patch)
        if review is None:
            return None
        logger.bind(log_type="admin").info(f"Review updated | id={review_id}")
        self._persist(slots.REVIEWS)
        return review

    def approve_review(self, caller: Optional[User], review_id: str) -> Optional[Review]:
        self.auth.require_admin(caller)
        review = self._patch(self.reviews, review_id, {"approved": True})
        if review is None:
            return None
        logger.bind(log_type="admin").info(f"Review approved | id={review_id}")
        self._persist(slots.REVIEWS)
        return review

    def delete_review(self, caller: Optional[User], review_id: str) -> bool:
        self.auth.require_admin(caller)
        if self.reviews.pop(review_id) is None:
            return False
        logger.bind(log_type="admin").info(f"Review deleted | id={review_id}")
        self._persist(slots.REVIEWS)
        return True

    # =====================================================================
    # BOOKINGS
    # =====================================================================
    def _check_item(self, booking: Booking):
        if booking.type == BookingType.ROOM and booking.room_id not in self.rooms:
            raise EntityNotFoundError("Room", booking.room_id)
        if booking.type == BookingType.HALL and booking.hall_id not in self.halls:
            raise EntityNotFoundError("Hall", booking.hall_id)

    def list_bookings(self) -> list[Booking]:
        return self.bookings.values()

    def get_booking(self, booking_id: str) -> Optional[Booking]:
        return self.bookings.get(booking_id)

    def payments_for_booking(self, booking_id: str) -> list[Payment]:
        return [p for p in self.payments.values() if p.booking_id == booking_id]

    def add_booking(self, data, caller: Optional[User] = None) -> Booking:
        """Record a booking, plus its Payment when it carries a paymentId.

        Public: guests create bookings through checkout without a session.
        The room or hall must exist, unless the booking is recorded as
        cancelled.
        """
        booking = self._create(BookingCreate, Booking, data)
        if booking.status != BookingStatus.CANCELLED:
            self._check_item(booking)
        self.bookings.insert(booking)
        touched = [slots.BOOKINGS]

        if booking.payment_id:
            payment = _validate(Payment, {
                "id": self.id_factory(),
                "booking_id": booking.id,
                "amount": booking.total_amount,
                "status": booking.payment_status.value,
                "payment_method": PaymentMethod.RAZORPAY,
                "transaction_id": booking.payment_id,
                "created_at": booking.created_at,
                "updated_at": booking.created_at,
            })
            self.payments.insert(payment)
            touched.append(slots.PAYMENTS)
            logger.bind(log_type="payment").info(
                f"Payment recorded | id={payment.id} | booking={booking.id} | "
                f"amount={payment.amount} | status={payment.status.value}"
            )

        logger.bind(log_type="booking").info(
            f"Booking created | id={booking.id} | {booking.type.value}={booking.item_id} | "
            f"status={booking.status.value} | total={booking.total_amount}"
            + (f" | by={caller.email}" if caller else "")
        )
        self._persist(*touched)
        return booking

    def update_booking(self, caller: Optional[User], booking_id: str, patch) -> Optional[Booking]:
        self.auth.require_admin(caller)
        booking = self._patch(self.bookings, booking_id, patch)
        if booking is None:
            return None
        logger.bind(log_type="booking").info(f"Booking updated | id={booking_id} | status={booking.status.value}")
        self._persist(slots.BOOKINGS)
        return booking

    def delete_booking(self, caller: Optional[User], booking_id: str) -> bool:
        self.auth.require_admin(caller)
        if self.bookings.pop(booking_id) is None:
            return False

        removed = [p.id for p in self.payments_for_booking(booking_id)]
        for payment_id in removed:
            self.payments.pop(payment_id)

        logger.bind(log_type="booking").info(f"Booking deleted | id={booking_id} | payments_removed={len(removed)}")
        self._persist(slots.BOOKINGS, slots.PAYMENTS)
        return True

    # =====================================================================
    # PAYMENTS
    # =====================================================================
    def list_payments(self) -> list[Payment]:
        return self.payments.values()

    def get_payment(self, payment_id: str) -> Optional[Payment]:
        return self.payments.get(payment_id)

    def add_payment(self, caller: Optional[User], data) -> Payment:
        self.auth.require_admin(caller)
        payment = self._create(PaymentCreate, Payment, data)
        self.payments.insert(payment)
        logger.bind(log_type="payment").info(
            f"Payment added | id={payment.id} | booking={payment.booking_id} | amount={payment.amount}"
        )
        self._persist(slots.PAYMENTS)
        return payment

    def update_payment(self, caller: Optional[User], payment_id: str, patch) -> Optional[Payment]:
        self.auth.require_admin(caller)
        payment = self._patch(self.payments, payment_id, patch)
        if payment is None:
            return None
        logger.bind(log_type="payment").info(f"Payment updated | id={payment_id} | status={payment.status.value}")
        self._persist(slots.PAYMENTS)
        return payment

    # =====================================================================
    # SETTINGS
    # =====================================================================
    def get_settings(self) -> HotelSettings:
        return self.settings

    def update_settings(self, caller: Optional[User], patch) -> HotelSettings:
        self.auth.require_admin(caller)
        fields = _field_names(HotelSettings, _as_dict(patch))
        self.settings = _validate(HotelSettings, {**self.settings.model_dump(), **fields})
        logger.bind(log_type="admin").info(f"Settings updated | fields={sorted(fields)}")
        self._persist(slots.SETTINGS)
        return self.settings
