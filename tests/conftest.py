"""Test environment: in-memory SQLite and cheap bcrypt, set before the app is imported."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["APP_ENV"] = "dev"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("SESSION_MAX_AGE_HOURS", None)
os.environ.pop("SESSION_COOKIE_NAME", None)
