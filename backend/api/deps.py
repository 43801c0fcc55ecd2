from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from scientometrics.crawler.scholar_client import ScholarApiClient
from scientometrics.database.article_repository import ArticleRepository
from scientometrics.database.db.session import SessionLocal
from scientometrics.database.researcher_repository import ResearcherRepository
from scientometrics.service.author_service import AuthorService


def get_db() -> Generator[Session, None, None]:
    """Yield a SQLAlchemy session; one transaction per request."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_scholar_client() -> ScholarApiClient:
    return ScholarApiClient()


def get_researcher_repo(db: Session = Depends(get_db)) -> ResearcherRepository:
    return ResearcherRepository(db)


def get_article_repo(db: Session = Depends(get_db)) -> ArticleRepository:
    return ArticleRepository(db)


def get_author_service(
    client: ScholarApiClient = Depends(get_scholar_client),
    researcher_repo: ResearcherRepository = Depends(get_researcher_repo),
    article_repo: ArticleRepository = Depends(get_article_repo),
) -> AuthorService:
    """Per-request service; nothing is shared between requests."""
    return AuthorService(client, researcher_repo, article_repo)
