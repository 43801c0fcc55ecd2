from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from scientometrics.exceptions import ScholarServiceError
from scientometrics.model.researcher import utcnow


class Article(BaseModel):
    """
    Persisted publication, owned by exactly one researcher.
    """

    id: Optional[int] = None
    researcher_id: Optional[int] = None

    title: str
    authors: Optional[str] = None
    publication_date: Optional[str] = None  # bare year, e.g. "2023"
    abstract_text: Optional[str] = None
    snippet: Optional[str] = None
    link: Optional[str] = None
    keywords: Optional[str] = None
    cited_by: int = 0

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    model_config = {
        "validate_assignment": True,
        "extra": "ignore",
        "from_attributes": True,
    }

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value

    def touch(self) -> None:
        self.updated_at = utcnow()


class ArticleTransfer(BaseModel):
    """
    Read-only projection of an Article plus its owner, returned by the
    read endpoints. Never persisted.
    """

    id: Optional[int] = None
    researcher_id: Optional[int] = None
    researcher_name: Optional[str] = None
    title: Optional[str] = None
    authors: Optional[str] = None
    publication_date: Optional[str] = None
    abstract_text: Optional[str] = None
    link: Optional[str] = None
    keywords: Optional[str] = None
    cited_by: Optional[int] = None
    snippet: Optional[str] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_required(self) -> ArticleTransfer:
        if self.title is None or not self.title.strip():
            raise ScholarServiceError.invalid_argument("Title cannot be null or empty")
        if self.researcher_id is None:
            raise ScholarServiceError.invalid_argument("Researcher ID cannot be null")
        return self
