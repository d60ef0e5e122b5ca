"""
Shared test fixtures and utilities for the Macro Tracker test suite.

Every test gets its own SQLite database file with the full schema, the macro
unit constraint and the seeded ingredient templates. The API client runs
against that database through a dependency override.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from domain.models import create_db_engine, init_database, get_db_session


# Realistic payloads shared across test modules
BREAKFAST = {
    "name": "Breakfast",
    "datetime": "2024-01-01T08:00:00Z",
    "ingredients": [
        {
            "name": "Egg",
            "quantity": 2,
            "carbs": 0.6,
            "fat": 5,
            "protein": 6,
            "kcal": 70,
            "macroUnit": "per_unit",
        }
    ],
}

OATS = {
    "name": "Oats",
    "quantity": 1,
    "carbs": 12,
    "fat": 1.8,
    "protein": 2.4,
    "kcal": 68,
    "macroUnit": "per_100g",
}


def make_meal(name="Lunch", when="2024-01-01T12:00:00Z", ingredients=None) -> dict:
    """Build a meal payload in the shape the API accepts"""
    return {
        "name": name,
        "datetime": when,
        "ingredients": [] if ingredients is None else ingredients,
    }


def make_ingredient_template(name="Cottage Cheese", macro_unit="per_100g", **macros) -> dict:
    payload = {
        "name": name,
        "carbs": 3.4,
        "fat": 4.3,
        "protein": 11,
        "kcal": 98,
        "macroUnit": macro_unit,
    }
    payload.update(macros)
    return payload


@pytest.fixture(scope="function")
def engine(tmp_path) -> Generator[Engine, None, None]:
    """
    Fresh SQLite database for one test.

    Yields:
        Engine: engine bound to a temporary database file with the schema
        initialized
    """
    db_engine = create_db_engine(f"sqlite:///{tmp_path / 'macro_tracker.db'}")
    init_database(db_engine)
    try:
        yield db_engine
    finally:
        db_engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a database session for repository tests.

    Yields:
        Session: SQLAlchemy session on the per-test database
    """
    SessionLocal = sessionmaker(bind=engine, future=True, expire_on_commit=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def client(engine) -> Generator[TestClient, None, None]:
    """
    TestClient whose requests use the per-test database.

    The application lifespan is not entered, so startup never touches the
    configured database.
    """
    from main import app

    SessionLocal = sessionmaker(bind=engine, future=True, expire_on_commit=False)

    def override_get_db_session():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db_session] = override_get_db_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
