"""Test fixtures: in-memory SQLite database and a FastAPI TestClient."""
from __future__ import annotations

import os

# Settings are read once at import time; configure them before importing the app.
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["CREATE_TABLES"] = "false"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ENABLE_METRICS"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from plantcare.database import Base, get_db
from plantcare.main import app

TEST_DATABASE_URL = "sqlite:///:memory:"


def _assert_memory_db(url: str):
    if url != "sqlite:///:memory:":
        raise RuntimeError(
            f"Refusing to run tests on non-memory DB: {url!r}. "
            "This guard protects your real database."
        )


engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture(scope="function")
def db():
    _assert_memory_db(TEST_DATABASE_URL)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db):
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def make_species(client):
    def _make_species(name: str = "Monstera deliciosa", **overrides):
        payload = {
            "name": name,
            "commonName": "Costela de Adão",
            "description": "Folhas grandes e recortadas",
            "careInstructions": "Regar uma vez por semana",
            "idealConditions": "Luz indireta e umidade moderada",
        }
        payload.update(overrides)
        rv = client.post("/species", json=payload)
        assert rv.status_code == 201, rv.json()
        return rv.json()
    return _make_species


@pytest.fixture()
def make_location(client):
    def _make_location(name: str = "Sala de Estar", **overrides):
        payload = {
            "name": name,
            "type": "indoor",
            "sunlight": "partial",
            "humidity": "medium",
            "description": "Janela voltada para o leste",
        }
        payload.update(overrides)
        rv = client.post("/locations", json=payload)
        assert rv.status_code == 201, rv.json()
        return rv.json()
    return _make_location


@pytest.fixture()
def make_plant(client):
    def _make_plant(name: str, species_name: str, location_name: str, **overrides):
        payload = {
            "name": name,
            "speciesName": species_name,
            "locationName": location_name,
            "purchaseDate": "2023-06-01",
            "notes": "Comprada na feira",
        }
        payload.update(overrides)
        rv = client.post("/plants", json=payload)
        assert rv.status_code == 201, rv.json()
        return rv.json()
    return _make_plant


@pytest.fixture()
def sample_plant(make_species, make_location, make_plant):
    species = make_species("Monstera deliciosa")
    location = make_location("Sala de Estar")
    plant = make_plant("Planta X", species["name"], location["name"])
    return {"species": species, "location": location, "plant": plant}
