from typing import List, Optional

from pydantic import BaseModel, Field


_WIRE_CONFIG = {
    "frozen": True,
    "extra": "ignore",
}


class AuthorInfo(BaseModel):
    name: Optional[str] = None
    link: Optional[str] = None
    author_id: Optional[str] = None

    model_config = _WIRE_CONFIG


class PublicationInfo(BaseModel):
    """
    e.g. summary="A Ng, D Smith - Nature, 2023 - nature.com"
    """

    summary: Optional[str] = None
    authors: Optional[List[AuthorInfo]] = None

    model_config = _WIRE_CONFIG


class CitedBy(BaseModel):
    total: Optional[int] = None
    link: Optional[str] = None

    model_config = _WIRE_CONFIG


class Versions(BaseModel):
    total: Optional[int] = None
    link: Optional[str] = None

    model_config = _WIRE_CONFIG


class InlineLinks(BaseModel):
    cited_by: Optional[CitedBy] = None
    versions: Optional[Versions] = None

    model_config = _WIRE_CONFIG


class PublicationRecord(BaseModel):
    """
    One entry of ``organic_results`` in a Google Scholar (SerpApi) response.
    """

    title: Optional[str] = None
    link: Optional[str] = None
    snippet: Optional[str] = None
    publication_info: Optional[PublicationInfo] = None
    inline_links: Optional[InlineLinks] = None

    model_config = _WIRE_CONFIG


class SearchMetadata(BaseModel):
    id: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    total_time_taken: Optional[float] = None

    model_config = _WIRE_CONFIG


class ApiResponse(BaseModel):
    """Top-level envelope returned by the search API."""

    search_metadata: Optional[SearchMetadata] = None
    organic_results: Optional[List[PublicationRecord]] = Field(default=None)
    error: Optional[str] = None

    model_config = _WIRE_CONFIG
