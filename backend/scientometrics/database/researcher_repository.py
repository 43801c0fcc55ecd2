from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from scientometrics.model.researcher import Researcher
from scientometrics.database.db.models import ArticleRow, ResearcherRow


class ResearcherRepository:
    """
    Researcher persistence bound to one SQLAlchemy session.

    Writes are flushed, not committed: the owner of the session decides
    when the transaction ends.
    """

    def __init__(self, db: Session):
        self.db = db

    # =====================================================
    # Basic CRUD
    # =====================================================

    def save(self, researcher: Researcher) -> Researcher:
        """
        Insert a new researcher, or overwrite an existing one by id.

        Returns a copy with ``id`` populated.
        """
        if researcher.id is None:
            row = ResearcherRow(**researcher.model_dump(exclude={"id"}))
            self.db.add(row)
        else:
            researcher.touch()
            row = self.db.merge(ResearcherRow(**researcher.model_dump()))

        self.db.flush()
        return self._row_to_researcher(row)

    def find_all(self) -> List[Researcher]:
        rows = self.db.execute(
            select(ResearcherRow).order_by(ResearcherRow.name.asc(), ResearcherRow.id.asc())
        ).scalars().all()
        return [self._row_to_researcher(r) for r in rows]

    def find_by_id(self, researcher_id: int) -> Optional[Researcher]:
        row = self.db.get(ResearcherRow, researcher_id)
        if not row:
            return None
        return self._row_to_researcher(row)

    def count(self) -> int:
        return self.db.execute(select(func.count(ResearcherRow.id))).scalar_one()

    def delete(self, researcher: Researcher) -> None:
        if researcher.id is None:
            return
        self.delete_by_id(researcher.id)

    def delete_by_id(self, researcher_id: int) -> None:
        """Delete a researcher together with all of its articles."""
        self.db.execute(delete(ArticleRow).where(ArticleRow.researcher_id == researcher_id))
        self.db.execute(delete(ResearcherRow).where(ResearcherRow.id == researcher_id))
        self.db.flush()

    # =====================================================
    # Lookups
    # =====================================================

    def find_by_name_containing(self, fragment: str) -> List[Researcher]:
        """
        Case-insensitive substring match on name, oldest first.
        """
        rows = self.db.execute(
            select(ResearcherRow)
            .where(func.lower(ResearcherRow.name).contains(fragment.lower(), autoescape=True))
            .order_by(ResearcherRow.id.asc())
        ).scalars().all()
        return [self._row_to_researcher(r) for r in rows]

    def find_by_author_id(self, author_id: str) -> Optional[Researcher]:
        row = self.db.execute(
            select(ResearcherRow).where(ResearcherRow.author_id == author_id)
        ).scalars().first()
        if not row:
            return None
        return self._row_to_researcher(row)

    # =====================================================
    # Helpers
    # =====================================================

    @staticmethod
    def _row_to_researcher(row: ResearcherRow) -> Researcher:
        return Researcher.model_validate(row)
