import uuid
import logging
from datetime import date, datetime, timezone
from sqlalchemy.orm import Session

from hotelquick.core.errors import NotFoundError
from hotelquick.core.latency import simulate_latency, LIST_BOOKINGS_MS, CREATE_BOOKING_MS, SET_STATUS_MS, GET_BOOKING_MS
from hotelquick.seed_data import SEED_BOOKINGS
from hotelquick.services.hotel_service import hotel_ids_for_provider
from hotelquick.services.store_service import BOOKINGS, read_collection, write_collection

logger = logging.getLogger(__name__)

PENDING = "pending"


def _read_bookings(db: Session) -> list[dict]:
    return read_collection(db, BOOKINGS, seed=SEED_BOOKINGS)


def _as_date(value: date | str) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def count_nights(check_in: date | str, check_out: date | str) -> int:
    return (_as_date(check_out) - _as_date(check_in)).days


def quote_total_price(price_per_night: float, check_in: date | str, check_out: date | str) -> float:
    return count_nights(check_in, check_out) * price_per_night


def list_for_consumer(db: Session, consumer_id: str) -> list[dict]:
    simulate_latency(LIST_BOOKINGS_MS)
    return [b for b in _read_bookings(db) if b.get("consumerId") == consumer_id]


def list_for_provider(db: Session, provider_id: str) -> list[dict]:
    """Bookings made against any hotel the provider owns, whoever the consumer is."""
    simulate_latency(LIST_BOOKINGS_MS)
    bookings = _read_bookings(db)
    owned = hotel_ids_for_provider(db, provider_id)
    return [b for b in bookings if b.get("hotelId") in owned]


def list_bookings(db: Session, user_id: str, role: str) -> list[dict]:
    if role == "consumer":
        return list_for_consumer(db, user_id)
    if role == "provider":
        return list_for_provider(db, user_id)
    return []


def create_booking(db: Session, data: dict) -> dict:
    """Append a pending booking. totalPrice is stored as supplied by the caller."""
    simulate_latency(CREATE_BOOKING_MS)
    bookings = _read_bookings(db)
    booking = {
        **data,
        "id": str(uuid.uuid4()),
        "status": PENDING,
        "createdAt": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    }
    bookings.append(booking)
    write_collection(db, BOOKINGS, bookings)
    logger.info("booking %s created for hotel %s by %s", booking["id"], booking.get("hotelId"), booking.get("consumerId"))
    return booking


def set_booking_status(db: Session, booking_id: str, status: str) -> dict:
    # No state-machine guard: a confirmed or rejected booking can be set again.
    simulate_latency(SET_STATUS_MS)
    bookings = _read_bookings(db)
    for i, b in enumerate(bookings):
        if b.get("id") == booking_id:
            break
    else:
        raise NotFoundError("Booking not found")

    previous = bookings[i].get("status")
    updated = {**bookings[i], "status": status}
    bookings[i] = updated
    write_collection(db, BOOKINGS, bookings)
    logger.info("booking %s status %s -> %s", booking_id, previous, status)
    return updated


def get_booking(db: Session, booking_id: str) -> dict:
    simulate_latency(GET_BOOKING_MS)
    for b in _read_bookings(db):
        if b.get("id") == booking_id:
            return b
    raise NotFoundError("Booking not found")
