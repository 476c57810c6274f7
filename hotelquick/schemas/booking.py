from datetime import date
from pydantic import BaseModel, Field, model_validator
from typing import Literal

class BookingIn(BaseModel):
    # consumerId is always the logged-in consumer, never taken from the body
    hotelId: str
    checkIn: date
    checkOut: date
    guests: int = Field(default=2, ge=1, le=10)
    totalPrice: float = Field(ge=0)

    @model_validator(mode="after")
    def _check_dates(self):
        if self.checkIn < date.today():
            raise ValueError("Check-in cannot be in the past")
        if self.checkOut <= self.checkIn:
            raise ValueError("Check-out must be after check-in")
        return self

class BookingStatusIn(BaseModel):
    status: Literal["confirmed", "rejected"]

class BookingOut(BaseModel):
    id: str
    hotelId: str
    consumerId: str
    checkIn: str
    checkOut: str
    guests: int
    status: str
    totalPrice: float
    createdAt: str
