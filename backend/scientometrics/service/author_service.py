# scientometrics/service/author_service.py

"""
Author Service - Google Scholar search and persistence

- build query parameters for author searches
- classify failed search responses
- save a bounded number of new publications per researcher
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from scientometrics.crawler.scholar_client import ScholarApiClient
from scientometrics.database.article_repository import ArticleRepository
from scientometrics.database.researcher_repository import ResearcherRepository
from scientometrics.exceptions import ScholarServiceError
from scientometrics.model import mapper
from scientometrics.model.publication import ApiResponse, PublicationRecord
from scientometrics.model.researcher import Researcher

logger = logging.getLogger(__name__)

MIN_RESULTS_PER_PAGE = 1
MAX_RESULTS_PER_PAGE = 20
SUCCESS_STATUS = "Success"


def build_query_params(
    name: str,
    start: Optional[int] = None,
    count: Optional[int] = None,
    year_from: Optional[int] = None,
    year_to: Optional[int] = None,
) -> Dict[str, str]:
    """
    Google Scholar query for publications by ``name``.

    The name is quoted as-is; embedded quotes are not escaped.
    Raises INVALID_ARGUMENT when ``count`` is outside [1, 20].
    """
    if count is not None and not MIN_RESULTS_PER_PAGE <= count <= MAX_RESULTS_PER_PAGE:
        raise ScholarServiceError.invalid_argument(
            f"numResults must be between {MIN_RESULTS_PER_PAGE} and {MAX_RESULTS_PER_PAGE}"
        )

    params = {"q": f'author:"{name}"'}

    if start is not None:
        params["start"] = str(start)
    if count is not None:
        params["num"] = str(count)
    if year_from is not None:
        params["as_ylo"] = str(year_from)
    if year_to is not None:
        params["as_yhi"] = str(year_to)

    return params


class AuthorService:
    """作者检索 & 入库服务"""

    def __init__(
        self,
        client: ScholarApiClient,
        researcher_repo: ResearcherRepository,
        article_repo: ArticleRepository,
    ):
        self.client = client
        self.researcher_repo = researcher_repo
        self.article_repo = article_repo

    # =====================================================
    # Search (read-only)
    # =====================================================

    def search_by_author(self, name: str) -> List[PublicationRecord]:
        return self.search(build_query_params(name))

    def search_by_author_with_pagination(
        self,
        name: str,
        start: int,
        count: int,
    ) -> List[PublicationRecord]:
        return self.search(build_query_params(name, start=start, count=count))

    def search_by_author_with_date_range(
        self,
        name: str,
        year_from: Optional[int] = None,
        year_to: Optional[int] = None,
    ) -> List[PublicationRecord]:
        return self.search(build_query_params(name, year_from=year_from, year_to=year_to))

    def search(self, params: Dict[str, str]) -> List[PublicationRecord]:
        """
        Run one search and return ``organic_results`` in upstream order.

        A response that reports an error, or whose metadata status is not
        "Success", raises UPSTREAM.
        """
        response = self.client.get(params)
        return self._check_response(response)

    @staticmethod
    def _check_response(response: ApiResponse) -> List[PublicationRecord]:
        if response.error is not None:
            raise ScholarServiceError.upstream(f"API returned error: {response.error}")

        metadata = response.search_metadata
        if metadata is not None and metadata.status is not None and metadata.status != SUCCESS_STATUS:
            raise ScholarServiceError.upstream(f"Search failed with status: {metadata.status}")

        return list(response.organic_results or [])

    # =====================================================
    # Search + persist
    # =====================================================

    def search_and_save(self, name: str, max_articles: int) -> List[PublicationRecord]:
        """
        Search ``name`` and store up to ``max_articles`` new publications.

        Only the first ``max_articles`` results are looked at; a result is
        skipped when the researcher already has an article with the exact
        same title. Returns the search results, not what was stored.

        Nothing is rolled back here on failure; the session owner decides.
        """
        publications = self.search_by_author(name)
        if not publications:
            logger.info(f"📭 No publications found for {name!r}, nothing saved")
            return publications

        try:
            researcher = self._find_or_create_researcher(name, publications)

            existing_titles = {a.title for a in self.article_repo.find_by_researcher_id(researcher.id)}

            to_scan = min(len(publications), max_articles)
            saved = 0

            for publication in publications[:to_scan]:
                if saved >= max_articles:
                    break
                if publication.title in existing_titles:
                    continue

                article = mapper.to_article(publication, researcher)
                self.article_repo.save(article)
                saved += 1

        except Exception as e:
            raise ScholarServiceError.persistence(
                f"Failed to save articles to database: {e}",
                cause=e,
            ) from e

        logger.info(
            f"📚 researcher={researcher.name!r} (id={researcher.id}) "
            f"found={len(publications)} scanned={to_scan} saved={saved}"
        )
        return publications

    def _find_or_create_researcher(
        self,
        name: str,
        publications: List[PublicationRecord],
    ) -> Researcher:
        """
        First stored researcher whose name contains ``name``; otherwise a
        new one, tagged with the first listed author's Scholar id if any.
        """
        existing = self.researcher_repo.find_by_name_containing(name)
        if existing:
            return existing[0]

        author_id = None
        info = publications[0].publication_info
        if info is not None and info.authors:
            author_id = info.authors[0].author_id

        researcher = Researcher(name=name, author_id=author_id)
        logger.info(f"👤 Creating researcher {name!r} (author_id={author_id})")
        return self.researcher_repo.save(researcher)
