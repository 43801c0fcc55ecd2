import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import get_article_repo, get_author_service, get_researcher_repo
from api.schemas.database import (
    ClearResponse,
    ResearcherResponse,
    SaveResponse,
    StatsResponse,
)
from scientometrics.config import Config
from scientometrics.database.article_repository import ArticleRepository
from scientometrics.database.researcher_repository import ResearcherRepository
from scientometrics.model import mapper
from scientometrics.model.article import ArticleTransfer
from scientometrics.model.researcher import Researcher
from scientometrics.service.author_service import AuthorService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/database", tags=["database"])


@router.post("/save", response_model=SaveResponse)
def search_and_save(
    name: str = Query(..., min_length=1),
    max_articles: int = Query(default=Config.default_max_articles, ge=1, alias="maxArticles"),
    service: AuthorService = Depends(get_author_service),
):
    """Search Google Scholar and store up to ``maxArticles`` new articles."""
    publications = service.search_and_save(name, max_articles)

    return SaveResponse(
        message="Data saved successfully",
        researcher_name=name,
        articles_saved=min(len(publications), max_articles),
        articles_found=len(publications),
    )


# --- Articles ---

@router.get("/articles", response_model=List[ArticleTransfer])
def get_all_articles(
    article_repo: ArticleRepository = Depends(get_article_repo),
    researcher_repo: ResearcherRepository = Depends(get_researcher_repo),
):
    """All stored articles, most cited first. Articles without an owner are skipped."""
    owners: Dict[int, Researcher] = {r.id: r for r in researcher_repo.find_all()}

    transfers = []
    for article in article_repo.find_all():
        owner = owners.get(article.researcher_id)
        if owner is None:
            logger.warning(f"⚠️ Article {article.id} has no researcher {article.researcher_id}, skipped")
            continue
        transfers.append(mapper.to_transfer(article, owner))
    return transfers


@router.get("/articles/researcher/{researcher_id}", response_model=List[ArticleTransfer])
def get_articles_by_researcher(
    researcher_id: int,
    article_repo: ArticleRepository = Depends(get_article_repo),
    researcher_repo: ResearcherRepository = Depends(get_researcher_repo),
):
    researcher = researcher_repo.find_by_id(researcher_id)
    if not researcher:
        raise HTTPException(status_code=404, detail="Researcher not found")
    return [
        mapper.to_transfer(article, researcher)
        for article in article_repo.find_by_researcher_id(researcher_id)
    ]


@router.get("/articles/{article_id}", response_model=ArticleTransfer)
def get_article(
    article_id: int,
    article_repo: ArticleRepository = Depends(get_article_repo),
    researcher_repo: ResearcherRepository = Depends(get_researcher_repo),
):
    article = article_repo.find_by_id(article_id)
    if not article:
        raise HTTPException(status_code=404, detail="Article not found")

    researcher = researcher_repo.find_by_id(article.researcher_id)
    if not researcher:
        raise HTTPException(status_code=404, detail="Researcher not found")
    return mapper.to_transfer(article, researcher)


# --- Researchers ---

@router.get("/researchers", response_model=List[ResearcherResponse])
def get_all_researchers(
    researcher_repo: ResearcherRepository = Depends(get_researcher_repo),
):
    """All stored researchers, ordered by name."""
    return [ResearcherResponse.from_researcher(r) for r in researcher_repo.find_all()]


@router.get("/researchers/{researcher_id}", response_model=ResearcherResponse)
def get_researcher(
    researcher_id: int,
    researcher_repo: ResearcherRepository = Depends(get_researcher_repo),
):
    researcher = researcher_repo.find_by_id(researcher_id)
    if not researcher:
        raise HTTPException(status_code=404, detail="Researcher not found")
    return ResearcherResponse.from_researcher(researcher)


# --- Stats / maintenance ---

@router.get("/stats", response_model=StatsResponse)
def get_statistics(
    article_repo: ArticleRepository = Depends(get_article_repo),
    researcher_repo: ResearcherRepository = Depends(get_researcher_repo),
):
    return StatsResponse(
        total_researchers=researcher_repo.count(),
        total_articles=article_repo.count(),
    )


@router.delete("/clear", response_model=ClearResponse)
def clear_all_data(
    article_repo: ArticleRepository = Depends(get_article_repo),
    researcher_repo: ResearcherRepository = Depends(get_researcher_repo),
):
    """Delete every stored article and researcher."""
    deleted_articles = article_repo.count()
    deleted_researchers = researcher_repo.count()

    for article in article_repo.find_all():
        article_repo.delete(article)
    for researcher in researcher_repo.find_all():
        researcher_repo.delete(researcher)

    logger.warning(
        f"🗑️ Database cleared: {deleted_articles} articles, {deleted_researchers} researchers"
    )
    return ClearResponse(
        message="Database cleared successfully",
        deleted_articles=deleted_articles,
        deleted_researchers=deleted_researchers,
    )
