from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from api.deps import get_author_service
from scientometrics.model.publication import PublicationRecord
from scientometrics.service.author_service import AuthorService

router = APIRouter(prefix="/api/authors", tags=["authors"])


@router.get("/search", response_model=List[PublicationRecord])
def search_author(
    name: str = Query(..., min_length=1),
    service: AuthorService = Depends(get_author_service),
):
    """Search Google Scholar for publications by an author."""
    return service.search_by_author(name)


@router.get("/search/paginated", response_model=List[PublicationRecord])
def search_author_paginated(
    name: str = Query(..., min_length=1),
    start: int = Query(default=0),
    num: int = Query(default=10),
    service: AuthorService = Depends(get_author_service),
):
    """Search one page of results; ``num`` must be between 1 and 20."""
    return service.search_by_author_with_pagination(name, start, num)


@router.get("/search/date-range", response_model=List[PublicationRecord])
def search_author_date_range(
    name: str = Query(..., min_length=1),
    year_from: Optional[int] = Query(default=None, alias="yearFrom"),
    year_to: Optional[int] = Query(default=None, alias="yearTo"),
    service: AuthorService = Depends(get_author_service),
):
    """Search restricted to a publication year range (either bound optional)."""
    return service.search_by_author_with_date_range(name, year_from, year_to)


@router.get("/health", response_class=PlainTextResponse)
def health():
    return "Google Scholar Integration API is running"
