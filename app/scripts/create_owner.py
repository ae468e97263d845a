"""
Create a hotel and its owner account without going through the signup endpoint.
Run from project root:
  python -m app.scripts.create_owner EMAIL PASSWORD FULLNAME HOTEL_NAME [--location ...] [--rooms N]
Example:
  python -m app.scripts.create_owner owner@example.com 'a-long-password' 'Ada Obi' 'Grand Palace' --rooms 10
"""
import argparse
import sys

from pydantic import ValidationError as SchemaValidationError

from app.core import SessionLocal
from app.schemas.auth import OwnerSignupRequest
from app.services.errors import ServiceError
from app.services.staff import signup_owner
from app.services.store import CredentialStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an Innkeep hotel and owner account.")
    parser.add_argument("email", help="Owner email (login name)")
    parser.add_argument("password", help="Password (8-128 chars)")
    parser.add_argument("fullname", help="Owner full name")
    parser.add_argument("hotel_name", help="Hotel name")
    parser.add_argument("--location", default=None, help="Hotel address")
    parser.add_argument("--rooms", type=int, default=None, help="Informational room count")
    args = parser.parse_args(argv)

    try:
        body = OwnerSignupRequest(
            fullname=args.fullname,
            email=args.email,
            password=args.password,
            hotel_name=args.hotel_name,
            location=args.location,
            room_count=args.rooms,
        )
    except SchemaValidationError as e:
        for err in e.errors():
            field = ".".join(str(p) for p in err["loc"])
            print(f"{field}: {err['msg']}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user, hotel = signup_owner(CredentialStore(db), body)
        print(f"Created hotel '{hotel.name}' ({hotel.id}) with owner '{user.email}'.")
        return 0
    except ServiceError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
