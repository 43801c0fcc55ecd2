from .article import Article, ArticleTransfer
from .publication import (
    ApiResponse,
    AuthorInfo,
    CitedBy,
    InlineLinks,
    PublicationInfo,
    PublicationRecord,
    SearchMetadata,
    Versions,
)
from .researcher import Researcher

__all__ = [
    "ApiResponse",
    "Article",
    "ArticleTransfer",
    "AuthorInfo",
    "CitedBy",
    "InlineLinks",
    "PublicationInfo",
    "PublicationRecord",
    "Researcher",
    "SearchMetadata",
    "Versions",
]
