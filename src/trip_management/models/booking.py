from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class BookingCreate(BaseModel):
    trip_id: int
    customer_id: int
    booking_date: date
    seats: int = Field(..., gt=0)


class BookingRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    booking_id: int
    trip_id: int
    customer_id: int
    booking_date: date
    seats: int


class BookingLogRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    log_id: int
    booking_id: int
    log_time: datetime
