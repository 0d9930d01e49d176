from sqlalchemy import Column, String, Text, DateTime, func
from hotel.db.session import Base


class StorageSlot(Base):
    __tablename__ = "storage_slots"

    # Slot name, e.g. "hotel_rooms" or "currentUser"
    key = Column(String(64), primary_key=True)

    # Whole serialized collection (JSON text), overwritten on every save
    value = Column(Text, nullable=False)

    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
