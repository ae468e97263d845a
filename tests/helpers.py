"""Shared helpers for tests that talk to the API or the database."""

import unittest

from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.core.database import SessionLocal, engine
from app.main import app
from app.models import Base

API = get_settings().API_V1_PREFIX
OWNER_PASSWORD = "supersecret1"
STAFF_PASSWORD = "staffpw1"


class DatabaseTestCase(unittest.TestCase):
    """Fresh schema per test; self.db is an open ORM session."""

    def setUp(self) -> None:
        Base.metadata.create_all(engine)
        self.db = SessionLocal()

    def tearDown(self) -> None:
        self.db.close()
        Base.metadata.drop_all(engine)


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus helpers that drive the HTTP API with per-user cookie jars."""

    def setUp(self) -> None:
        super().setUp()
        self._clients: list[TestClient] = []

    def tearDown(self) -> None:
        for client in self._clients:
            client.close()
        super().tearDown()

    def new_client(self) -> TestClient:
        client = TestClient(app)
        self._clients.append(client)
        return client

    def signup_owner(
        self,
        email: str = "owner@example.com",
        hotel_name: str = "Grand Palace",
        **extra: object,
    ) -> tuple[TestClient, dict]:
        """Sign up an owner on a new client; returns (client, user summary)."""
        client = self.new_client()
        payload = {
            "fullname": "Ada Obi",
            "email": email,
            "password": OWNER_PASSWORD,
            "hotelName": hotel_name,
        }
        payload.update(extra)
        resp = client.post(f"{API}/auth/signup", json=payload)
        self.assertEqual(resp.status_code, 201, resp.text)
        return client, resp.json()["user"]

    def staff_signup(
        self,
        hotel_id: str,
        email: str = "staff@example.com",
        role: str = "staff",
        password: str = STAFF_PASSWORD,
    ):
        return self.new_client().post(
            f"{API}/auth/staff-signup",
            json={
                "fullname": "Sam Staff",
                "email": email,
                "phone": "08012345678",
                "password": password,
                "hotelId": hotel_id,
                "role": role,
            },
        )

    def login(self, email: str, password: str) -> tuple[TestClient, object]:
        client = self.new_client()
        resp = client.post(f"{API}/auth/login", json={"email": email, "password": password})
        return client, resp

    def user_id_by_email(self, client: TestClient, email: str) -> str:
        resp = client.get(f"{API}/staff")
        self.assertEqual(resp.status_code, 200, resp.text)
        matches = [u["id"] for u in resp.json() if u["email"] == email]
        self.assertEqual(len(matches), 1)
        return matches[0]

    def add_rooms(self, client: TestClient, numbers: list[str], price: float = 50000) -> list[dict]:
        resp = client.post(
            f"{API}/rooms",
            json={"roomNumbers": numbers, "type": "DELUXE", "price": price},
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        rooms = client.get(f"{API}/rooms").json()
        return [r for r in rooms if r["roomNumber"] in numbers]
