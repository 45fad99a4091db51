from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from trip_management.models.status import TripStatus


class TripCreate(BaseModel):
    destination: str = Field(..., min_length=1, max_length=50)
    start_date: date
    end_date: date
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    status: TripStatus = TripStatus.PLANNED

    @model_validator(mode="after")
    def end_after_start(self) -> "TripCreate":
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self


class TripRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    trip_id: int
    destination: str
    start_date: date
    end_date: date
    price: Decimal
    status: TripStatus


class TripBookingCount(BaseModel):
    trip_id: int
    total_bookings: int
