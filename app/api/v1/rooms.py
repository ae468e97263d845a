"""Room inventory endpoints, scoped to the caller's hotel."""

from fastapi import APIRouter, status

from app.api.v1.deps import HotelMember, Store
from app.schemas.inventory import (
    RoomCreateRequest,
    RoomCreateResponse,
    RoomOut,
    RoomStatusUpdate,
)
from app.services import inventory

router = APIRouter()


@router.get("", response_model=list[RoomOut])
def list_rooms(identity: HotelMember, store: Store) -> list[RoomOut]:
    """All rooms of the caller's hotel, ordered by room number."""
    rooms = inventory.list_rooms(store, identity.hotel_id)
    return [RoomOut.model_validate(r) for r in rooms]


@router.post("", response_model=RoomCreateResponse, status_code=status.HTTP_201_CREATED)
def add_rooms(
    body: RoomCreateRequest,
    identity: HotelMember,
    store: Store,
) -> RoomCreateResponse:
    """
    Add one or more rooms sharing type, rate and status.

    If any number already exists in the hotel nothing is created and the 409
    response lists every duplicate.
    """
    rooms = inventory.add_rooms(
        store,
        identity.hotel_id,
        body.room_numbers,
        body.type,
        body.price,
        body.status,
    )
    return RoomCreateResponse(
        count=len(rooms),
        message=f"{len(rooms)} room(s) added successfully",
    )


@router.get("/{room_id}", response_model=RoomOut)
def get_room(room_id: str, identity: HotelMember, store: Store) -> RoomOut:
    return RoomOut.model_validate(inventory.get_room(store, identity.hotel_id, room_id))


@router.patch("/{room_id}", response_model=RoomOut)
def update_room(
    room_id: str,
    body: RoomStatusUpdate,
    identity: HotelMember,
    store: Store,
) -> RoomOut:
    room = inventory.update_room_status(store, identity.hotel_id, room_id, body.status)
    return RoomOut.model_validate(room)
