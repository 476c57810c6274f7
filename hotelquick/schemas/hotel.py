from urllib.parse import urlparse
from datetime import date
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Optional


def split_amenities(v):
    # The hotel form sends amenities as one comma-joined string.
    if isinstance(v, str):
        return [a.strip() for a in v.split(",") if a.strip()]
    return v


def check_url(v: str) -> str:
    p = urlparse(v)
    if p.scheme not in ("http", "https") or not p.netloc:
        raise ValueError("Please enter a valid URL")
    return v


class HotelIn(BaseModel):
    name: str = Field(min_length=3)
    description: str = Field(min_length=20)
    address: str = Field(min_length=5)
    price: float = Field(ge=1)
    image: str
    rooms: int = Field(ge=1)
    amenities: List[str] = []
    # providerId is always the logged-in provider, never taken from the body

    @field_validator("amenities", mode="before")
    @classmethod
    def amenities_from_csv(cls, v):
        return split_amenities(v)

    @field_validator("image")
    @classmethod
    def image_is_url(cls, v: str) -> str:
        return check_url(v)


class HotelPatch(BaseModel):
    name: Optional[str] = Field(default=None, min_length=3)
    description: Optional[str] = Field(default=None, min_length=20)
    address: Optional[str] = Field(default=None, min_length=5)
    price: Optional[float] = Field(default=None, ge=1)
    image: Optional[str] = None
    rooms: Optional[int] = Field(default=None, ge=1)
    amenities: Optional[List[str]] = None

    @field_validator("amenities", mode="before")
    @classmethod
    def amenities_from_csv(cls, v):
        return split_amenities(v)

    @field_validator("image")
    @classmethod
    def image_is_url(cls, v: Optional[str]) -> Optional[str]:
        return check_url(v) if v is not None else v


class HotelOut(BaseModel):
    id: str
    name: str = ""
    description: str = ""
    address: str = ""
    price: float = 0
    rating: float = 0
    image: str = ""
    rooms: int = 0
    amenities: List[str] = []
    providerId: Optional[str] = None


class PriceQuoteOut(BaseModel):
    hotelId: str
    checkIn: str
    checkOut: str
    nights: int
    pricePerNight: float
    totalPrice: float


class HotelFilterParams(BaseModel):
    search: str = ""
    minPrice: Optional[float] = Field(default=None, ge=0)
    maxPrice: Optional[float] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_range(self):
        if self.minPrice is not None and self.maxPrice is not None and self.maxPrice < self.minPrice:
            raise ValueError("Max price must be greater than min price")
        return self


class StayQuery(BaseModel):
    checkIn: date
    checkOut: date

    @model_validator(mode="after")
    def _check_dates(self):
        if self.checkOut <= self.checkIn:
            raise ValueError("Check-out must be after check-in")
        return self
