from typing import Annotated
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from hotelquick.db.session import get_db
from hotelquick.api.deps import require_roles
from hotelquick.core.errors import NotFoundError
from hotelquick.schemas.hotel import HotelIn, HotelPatch, HotelOut, HotelFilterParams, PriceQuoteOut, StayQuery
from hotelquick.services import hotel_service
from hotelquick.services.booking_service import count_nights, quote_total_price

router = APIRouter(tags=["hotels"])


@router.get("/hotels", response_model=list[HotelOut])
def list_hotels(filters: Annotated[HotelFilterParams, Query()], db: Session = Depends(get_db)):
    hotels = hotel_service.list_hotels(db)
    return hotel_service.filter_hotels(hotels, filters.search, filters.minPrice, filters.maxPrice)


@router.get("/hotels/{hotel_id}", response_model=HotelOut)
def get_hotel(hotel_id: str, db: Session = Depends(get_db)):
    try:
        return hotel_service.get_hotel(db, hotel_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/hotels/{hotel_id}/quote", response_model=PriceQuoteOut)
def quote(hotel_id: str, stay: Annotated[StayQuery, Query()], db: Session = Depends(get_db)):
    """Nights and total price the booking form submits as totalPrice."""
    try:
        hotel = hotel_service.get_hotel(db, hotel_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    price = hotel.get("price") or 0
    return PriceQuoteOut(
        hotelId=hotel_id,
        checkIn=stay.checkIn.isoformat(),
        checkOut=stay.checkOut.isoformat(),
        nights=count_nights(stay.checkIn, stay.checkOut),
        pricePerNight=price,
        totalPrice=quote_total_price(price, stay.checkIn, stay.checkOut),
    )


@router.post("/hotels", response_model=HotelOut)
def create_hotel(body: HotelIn, db: Session = Depends(get_db),
                 me: dict = Depends(require_roles("provider"))):
    data = body.model_dump()
    data["providerId"] = me["id"]
    return hotel_service.create_hotel(db, data)


@router.patch("/hotels/{hotel_id}", response_model=HotelOut)
def update_hotel(hotel_id: str, body: HotelPatch, db: Session = Depends(get_db),
                 me: dict = Depends(require_roles("provider"))):
    try:
        existing = hotel_service.get_hotel(db, hotel_id)
        if existing.get("providerId") != me["id"]:
            raise HTTPException(status_code=403, detail="Hotel belongs to another provider")
        partial = {k: v for k, v in body.model_dump(exclude_unset=True).items() if v is not None}
        return hotel_service.update_hotel(db, hotel_id, partial)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/hotels/{hotel_id}")
def delete_hotel(hotel_id: str, db: Session = Depends(get_db),
                 me: dict = Depends(require_roles("provider"))):
    try:
        existing = hotel_service.get_hotel(db, hotel_id)
    except NotFoundError:
        existing = None
    if existing and existing.get("providerId") != me["id"]:
        raise HTTPException(status_code=403, detail="Hotel belongs to another provider")
    hotel_service.delete_hotel(db, hotel_id)
    return {"success": True}
