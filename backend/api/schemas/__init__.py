from scientometrics.model.article import ArticleTransfer
from scientometrics.model.publication import PublicationRecord

from .database import (
    ClearResponse,
    ErrorResponse,
    ResearcherResponse,
    SaveResponse,
    StatsResponse,
)

__all__ = [
    "ArticleTransfer",
    "ClearResponse",
    "ErrorResponse",
    "PublicationRecord",
    "ResearcherResponse",
    "SaveResponse",
    "StatsResponse",
]
