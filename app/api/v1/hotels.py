"""Hotel endpoints: the caller's own hotel, and the public lookup used by invite links."""

from fastapi import APIRouter

from app.api.v1.deps import HotelMember, Store
from app.schemas.hotel import HotelDetail, HotelPublic, parse_uuid
from app.services.errors import NotFoundError, ValidationError

router = APIRouter()


@router.get("/me", response_model=HotelDetail)
def get_my_hotel(identity: HotelMember, store: Store) -> HotelDetail:
    hotel = store.get_hotel(identity.hotel_id)
    if hotel is None:
        raise NotFoundError("Hotel not found")
    return HotelDetail.model_validate(hotel)


@router.get("/{hotel_id}", response_model=HotelPublic)
def get_hotel(hotel_id: str, store: Store) -> HotelPublic:
    """Public hotel fields for the staff signup page. 400 for a malformed id."""
    try:
        hotel_id = parse_uuid(hotel_id, "Invalid hotel ID format")
    except ValueError as e:
        raise ValidationError(str(e)) from e
    hotel = store.get_hotel(hotel_id)
    if hotel is None:
        raise NotFoundError("Hotel not found")
    return HotelPublic.model_validate(hotel)
