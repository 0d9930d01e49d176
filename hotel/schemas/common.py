from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class HotelModel(BaseModel):
    """Base for every persisted record.

    Attributes are snake_case in Python and camelCase on the wire and in
    storage slots (``customerName``, ``createdAt``...). Either spelling is
    accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def to_slot(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Timestamped(HotelModel):
    id: str
    created_at: datetime
    updated_at: datetime


class PatchModel(HotelModel):
    """Partial update body; only fields the caller sent are applied."""

    def to_patch(self) -> dict:
        return self.model_dump(exclude_unset=True)
