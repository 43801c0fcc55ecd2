"""
Conversions between the three shapes of a publication.

    PublicationRecord (search API)  ->  Article (database)
    Article + Researcher            ->  ArticleTransfer (HTTP responses)
"""

from __future__ import annotations

import re
from typing import Optional

from scientometrics.model.article import Article, ArticleTransfer
from scientometrics.model.publication import PublicationRecord
from scientometrics.model.researcher import Researcher


STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at",
    "to", "for", "of", "with", "by", "from", "as",
})

MIN_KEYWORD_LENGTH = 4

_YEAR_RE = re.compile(r"(?<!\d)((?:19|20)\d{2})(?!\d)")
_NON_KEYWORD_CHARS_RE = re.compile(r"[^a-z0-9\s]")


def to_article(publication: PublicationRecord, researcher: Researcher) -> Article:
    """
    Build an unsaved Article owned by ``researcher`` from a search result.
    """
    info = publication.publication_info

    authors = None
    if info is not None and info.authors is not None:
        authors = ", ".join(author.name or "" for author in info.authors)

    publication_date = extract_publication_date(info.summary) if info is not None else None

    cited_by = 0
    links = publication.inline_links
    if links is not None and links.cited_by is not None and links.cited_by.total is not None:
        cited_by = links.cited_by.total

    return Article(
        researcher_id=researcher.id,
        title=publication.title,
        authors=authors,
        publication_date=publication_date,
        # Google Scholar only exposes a snippet, reused as the abstract
        abstract_text=publication.snippet,
        snippet=publication.snippet,
        link=publication.link,
        keywords=extract_keywords(publication.title, publication.snippet),
        cited_by=cited_by,
    )


def to_transfer(article: Article, researcher: Researcher) -> ArticleTransfer:
    return ArticleTransfer(
        id=article.id,
        researcher_id=researcher.id,
        researcher_name=researcher.name,
        title=article.title,
        authors=article.authors,
        publication_date=article.publication_date,
        abstract_text=article.abstract_text,
        link=article.link,
        keywords=article.keywords,
        cited_by=article.cited_by,
        snippet=article.snippet,
    )


def extract_publication_date(summary: Optional[str]) -> Optional[str]:
    """
    Pull the year out of a Google Scholar summary line.

    "A Ng, D Smith - Nature, 2023 - nature.com" -> "2023"
    """
    if summary is None or not summary.strip():
        return None

    for part in summary.split("-"):
        match = _YEAR_RE.search(part.strip())
        if match:
            return match.group(1)

    return None


def extract_keywords(title: Optional[str], snippet: Optional[str] = None) -> Optional[str]:
    """
    Significant title words, comma-joined in title order.

    ``snippet`` is accepted so callers need not change once abstracts are
    mined too; it is ignored for now.
    """
    if title is None or not title.strip():
        return None

    words = _NON_KEYWORD_CHARS_RE.sub("", title.lower()).split()

    return ", ".join(
        word for word in words
        if word not in STOP_WORDS and len(word) >= MIN_KEYWORD_LENGTH
    )
