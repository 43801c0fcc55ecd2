from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Researcher(BaseModel):
    """
    Researcher 数据模型

    Created the first time a name is persisted; ``id`` is assigned by the
    store on save. Articles reference the researcher through
    ``Article.researcher_id``.
    """

    id: Optional[int] = None

    name: str
    author_id: Optional[str] = None  # Google Scholar author id, e.g. "mG4imMEAAAAJ"
    affiliations: Optional[str] = None
    cited_by: Optional[int] = None
    email: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    model_config = {
        "validate_assignment": True,
        "extra": "ignore",
        "from_attributes": True,
    }

    def touch(self) -> None:
        """Bump ``updated_at`` before an update is written."""
        self.updated_at = utcnow()
