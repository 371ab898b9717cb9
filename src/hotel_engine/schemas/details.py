from decimal import Decimal
from typing import Type, TypeVar

from pydantic import BaseModel, Field, ValidationError, field_validator

from hotel_engine.models.rooms import RoomType
from hotel_engine.utils.custom_exceptions import InvalidDetails

M = TypeVar("M", bound=BaseModel)


class RoomDetails(BaseModel):
    room_number: str = Field(min_length=1)
    type: RoomType
    price_per_night: Decimal = Field(ge=0)
    available: bool = True
    refundable: bool = True

    @field_validator("room_number")
    @classmethod
    def strip_room_number(cls, v: str):
        v = v.strip()
        if not v:
            raise ValueError("room number is required")
        return v

    @field_validator("type", mode="before")
    @classmethod
    def normalise_type(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v


class GuestDetails(BaseModel):
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    email: str = Field(min_length=1)

    @field_validator("name", "phone", "email")
    @classmethod
    def strip_required(cls, v: str):
        v = v.strip()
        if not v:
            raise ValueError("field is required")
        return v


def parse_details(schema: Type[M], data) -> M:
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        formatted = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidDetails(formatted) from e
