from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from scientometrics.model.researcher import Researcher


class ResearcherResponse(BaseModel):
    id: int
    name: str
    author_id: Optional[str] = None
    affiliations: Optional[str] = None
    cited_by: Optional[int] = None
    email: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_researcher(cls, researcher: Researcher) -> ResearcherResponse:
        return cls(**researcher.model_dump())


class SaveResponse(BaseModel):
    message: str
    researcher_name: str
    articles_saved: int
    articles_found: int


class StatsResponse(BaseModel):
    total_researchers: int
    total_articles: int


class ClearResponse(BaseModel):
    message: str
    deleted_articles: int
    deleted_researchers: int


class ErrorResponse(BaseModel):
    error: str
    message: str
    upstream_status: Optional[int] = None
