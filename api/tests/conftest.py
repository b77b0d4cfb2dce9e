"""Common pytest fixtures for API tests.

Tests run against an in-memory SQLite database. DATABASE_URL has to be set
before the app (and its engine) is imported.
"""

import os
from collections.abc import Iterator

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("DEFAULT_LOCALE", "en")

import pytest
from academix_api.db import engine, init_db
from academix_api.main import app
from fastapi.testclient import TestClient
from sqlalchemy import delete
from sqlmodel import Session

from academix_models import (
    Category,
    CategoryTranslation,
    Item,
    ItemSubCategoryLink,
    ItemTranslation,
    Language,
    SubCategory,
    SubCategoryTranslation,
)


@pytest.fixture(scope="session", autouse=True)
def _schema() -> Iterator[None]:
    init_db()
    yield


@pytest.fixture(scope="session")
def client() -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c


@pytest.fixture(autouse=True)
def _clean_db() -> Iterator[None]:
    with Session(engine) as session:
        # Children before parents
        for model in (
            ItemTranslation,
            SubCategoryTranslation,
            CategoryTranslation,
            ItemSubCategoryLink,
            Item,
            SubCategory,
            Category,
            Language,
        ):
            session.exec(delete(model))
        session.commit()
    yield


@pytest.fixture()
def session() -> Iterator[Session]:
    with Session(engine) as s:
        yield s


@pytest.fixture()
def languages(session: Session) -> dict[str, int]:
    """Ids of the en/fr/si languages, keyed by locale."""
    rows = [Language(locale=loc) for loc in ("en", "fr", "si")]
    for row in rows:
        session.add(row)
    session.commit()
    return {row.locale: row.id for row in rows}
