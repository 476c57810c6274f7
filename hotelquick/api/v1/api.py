from fastapi import APIRouter
from hotelquick.api.v1.routes.auth import router as auth_router
from hotelquick.api.v1.routes.hotels import router as hotels_router
from hotelquick.api.v1.routes.bookings import router as bookings_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth_router)
api_router.include_router(hotels_router)
api_router.include_router(bookings_router)
