from sqlalchemy import (
    Column,
    String,
    Text,
    DateTime,
    ForeignKey,
    Integer,
    Index,
)
from sqlalchemy.orm import declarative_base


Base = declarative_base()


class ResearcherRow(Base):
    __tablename__ = "researchers"

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String(255), nullable=False, index=True)
    author_id = Column(String(100), unique=True, nullable=True)  # Google Scholar author id
    affiliations = Column(Text)
    cited_by = Column(Integer)
    email = Column(String(255))

    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True))


class ArticleRow(Base):
    """
    One stored publication. Only the owner's id is kept here; removing a
    researcher's articles is done explicitly by ResearcherRepository.
    """
    __tablename__ = "articles"
    __table_args__ = (
        Index("idx_researcher_id", "researcher_id"),
        Index("idx_title", "title"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    researcher_id = Column(
        Integer,
        ForeignKey("researchers.id", ondelete="CASCADE"),
        nullable=False,
    )

    title = Column(String(500), nullable=False)
    authors = Column(Text)
    publication_date = Column(String(50))
    abstract_text = Column("abstract", Text)
    link = Column(String(500))
    keywords = Column(Text)
    cited_by = Column(Integer, default=0)
    snippet = Column(Text)

    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True))
