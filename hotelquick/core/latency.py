import time

from hotelquick.core.config import settings

# Fixed simulated round-trip per operation, in milliseconds.
LIST_HOTELS_MS = 800
GET_HOTEL_MS = 500
WRITE_HOTEL_MS = 1000
LIST_BOOKINGS_MS = 800
CREATE_BOOKING_MS = 1000
SET_STATUS_MS = 500
GET_BOOKING_MS = 500
LOGIN_MS = 1000


def simulate_latency(ms: int) -> None:
    """Block for `ms` milliseconds scaled by LATENCY_FACTOR."""
    delay = ms * settings.LATENCY_FACTOR / 1000.0
    if delay > 0:
        time.sleep(delay)
