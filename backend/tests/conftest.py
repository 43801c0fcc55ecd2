# tests/conftest.py

import os

# Must be set before scientometrics.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SERPAPI__API_KEY", "test-key")

from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from scientometrics.database.db.models import Base
from scientometrics.model.publication import ApiResponse, PublicationRecord, SearchMetadata


class FakeScholarClient:
    """Stands in for ScholarApiClient; records every parameter mapping."""

    def __init__(self, response: Optional[ApiResponse] = None):
        self.response = response or make_response([])
        self.calls: List[Dict[str, str]] = []

    def get(self, params):
        self.calls.append(dict(params))
        return self.response


def make_publication(
    title: Optional[str],
    summary: Optional[str] = "A Ng, D Smith - Nature, 2023 - nature.com",
    author_id: Optional[str] = "mG4imMEAAAAJ",
    cited_by: Optional[int] = None,
    snippet: str = "A short snippet.",
) -> PublicationRecord:
    data: Dict[str, Any] = {
        "title": title,
        "link": f"https://example.org/{(title or 'untitled').replace(' ', '-').lower()}",
        "snippet": snippet,
        "publication_info": {
            "summary": summary,
            "authors": [
                {"name": "A Ng", "link": "https://scholar.google.com/a", "author_id": author_id},
                {"name": "D Smith", "link": None, "author_id": None},
            ],
        },
    }
    if cited_by is not None:
        data["inline_links"] = {"cited_by": {"total": cited_by, "link": "https://scholar.google.com/c"}}
    return PublicationRecord.model_validate(data)


def make_response(
    publications: Optional[List[PublicationRecord]],
    status: Optional[str] = "Success",
    error: Optional[str] = None,
) -> ApiResponse:
    return ApiResponse(
        search_metadata=SearchMetadata(id="test-id", status=status) if status is not None else None,
        organic_results=publications,
        error=error,
    )


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def fake_client():
    return FakeScholarClient()


@pytest.fixture
def client(session_factory, fake_client):
    from api.deps import get_db, get_scholar_client
    from main import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_scholar_client] = lambda: fake_client

    yield TestClient(app)

    app.dependency_overrides.clear()
