from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from scientometrics.model.article import Article
from scientometrics.database.db.models import ArticleRow


class ArticleRepository:
    """
    Article persistence bound to one SQLAlchemy session.
    """

    def __init__(self, db: Session):
        self.db = db

    def save(self, article: Article) -> Article:
        """
        Insert a new article, or overwrite an existing one by id.
        """
        if article.id is None:
            row = ArticleRow(**article.model_dump(exclude={"id"}))
            self.db.add(row)
        else:
            article.touch()
            row = self.db.merge(ArticleRow(**article.model_dump()))

        self.db.flush()
        return Article.model_validate(row)

    def find_all(self) -> List[Article]:
        """All articles, most cited first."""
        rows = self.db.execute(
            select(ArticleRow).order_by(ArticleRow.cited_by.desc(), ArticleRow.id.asc())
        ).scalars().all()
        return [Article.model_validate(r) for r in rows]

    def find_by_id(self, article_id: int) -> Optional[Article]:
        row = self.db.get(ArticleRow, article_id)
        if not row:
            return None
        return Article.model_validate(row)

    def find_by_researcher_id(self, researcher_id: int) -> List[Article]:
        rows = self.db.execute(
            select(ArticleRow)
            .where(ArticleRow.researcher_id == researcher_id)
            .order_by(ArticleRow.id.asc())
        ).scalars().all()
        return [Article.model_validate(r) for r in rows]

    def count(self) -> int:
        return self.db.execute(select(func.count(ArticleRow.id))).scalar_one()

    def delete(self, article: Article) -> None:
        if article.id is None:
            return
        self.delete_by_id(article.id)

    def delete_by_id(self, article_id: int) -> None:
        self.db.execute(delete(ArticleRow).where(ArticleRow.id == article_id))
        self.db.flush()
