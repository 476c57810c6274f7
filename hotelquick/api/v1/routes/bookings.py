from typing import Literal, Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from hotelquick.db.session import get_db
from hotelquick.api.deps import get_current_identity, require_roles
from hotelquick.core.errors import NotFoundError
from hotelquick.schemas.booking import BookingIn, BookingStatusIn, BookingOut
from hotelquick.services import booking_service
from hotelquick.services.hotel_service import hotel_ids_for_provider

router = APIRouter(tags=["bookings"])


@router.get("/bookings", response_model=list[BookingOut])
def list_bookings(status: Optional[Literal["pending", "confirmed", "rejected"]] = None, db: Session = Depends(get_db),
                  me: dict = Depends(get_current_identity)):
    """Consumers see their own bookings; providers see bookings against hotels they own."""
    items = booking_service.list_bookings(db, me["id"], me["role"])
    if status:
        items = [b for b in items if b.get("status") == status]
    return items


@router.post("/bookings", response_model=BookingOut)
def create_booking(body: BookingIn, db: Session = Depends(get_db),
                   me: dict = Depends(require_roles("consumer"))):
    data = body.model_dump(mode="json")
    data["consumerId"] = me["id"]
    return booking_service.create_booking(db, data)


@router.patch("/bookings/{booking_id}/status", response_model=BookingOut)
def set_booking_status(booking_id: str, body: BookingStatusIn, db: Session = Depends(get_db),
                       me: dict = Depends(require_roles("provider"))):
    try:
        booking = booking_service.get_booking(db, booking_id)
        if booking.get("hotelId") not in hotel_ids_for_provider(db, me["id"]):
            raise HTTPException(status_code=403, detail="Booking is for another provider's hotel")
        return booking_service.set_booking_status(db, booking_id, body.status)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
