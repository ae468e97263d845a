"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import auth, bookings, health, hotels, rooms, staff

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(hotels.router, prefix="/hotels", tags=["hotels"])
router.include_router(rooms.router, prefix="/rooms", tags=["rooms"])
router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
router.include_router(staff.router, prefix="/staff", tags=["staff"])
