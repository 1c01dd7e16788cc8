"""Shared fixtures: in-memory SQLite per test and a few seeded users."""
from __future__ import annotations

import os

# Must be set before app.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "profile-tests")

import pytest
from fastapi.testclient import TestClient

from app.database import Base, SessionLocal, engine
from app.main import app
from app.models.user import User

from factories import make_user


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def alice(db) -> User:
    return make_user(
        db,
        "user_alice",
        "alice",
        name="Alice",
        surname="Liddell",
        avatar="https://cdn.example.com/alice.png",
        cover="https://cdn.example.com/alice-cover.png",
        city="Oxford",
        work="Wonderland Ltd",
    )


@pytest.fixture
def bob(db) -> User:
    return make_user(db, "user_bob", "bob")


@pytest.fixture
def carol(db) -> User:
    return make_user(db, "user_carol", "carol", name="Carol")
