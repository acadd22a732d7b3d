from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

# largest id an INTEGER column can hold
MAX_ID = 2**63 - 1


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ================== REQUESTS ==================
class BookingTimes(CamelModel):
    start_date: datetime
    end_date: datetime

    @field_validator("start_date", "end_date")
    @classmethod
    def to_naive_utc(cls, value: datetime) -> datetime:
        # bookings are stored as naive UTC
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    @model_validator(mode="after")
    def check_order(self):
        if self.start_date >= self.end_date:
            raise ValueError("startDate must be before endDate")
        return self


class BookingCreate(BookingTimes):
    parking_id: int = Field(le=MAX_ID)


class BookingUpdate(BookingTimes):
    pass


# ================== RESPONSES ==================
class UserOut(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    role: str


class ParkingOut(CamelModel):
    id: int
    name: str


class BookingOut(CamelModel):
    id: int
    user: Optional[UserOut] = None
    parking: Optional[ParkingOut] = None
    start_date: datetime
    end_date: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BookingResponse(BaseModel):
    data: BookingOut


class SuccessResponse(BaseModel):
    success: bool = True


class CreatedResponse(SuccessResponse):
    id: int
