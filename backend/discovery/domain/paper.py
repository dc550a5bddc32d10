"""Domain dataclasses for papers and topic categories (DB-agnostic)."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional

UNKNOWN_AUTHOR = "Unknown Author"


@dataclass(slots=True)
class PaperRow:
    id: str
    title: Optional[str] = None
    authors: Optional[str] = None
    abstract: Optional[str] = None
    category: Optional[str] = None
    year_published: Optional[int] = None
    views: int = 0
    uploaded_at: Optional[datetime] = None


@dataclass(slots=True)
class PaperSummary:
    id: str
    title: Optional[str]
    authors: str
    year: Optional[int]
    abstract: Optional[str]
    views: int = 0


@dataclass(slots=True)
class Category:
    slug: str
    display_name: str
    raw_name: str
    paper_count: int = 0
    top_papers: List[PaperSummary] = field(default_factory=list)


def summarize(row: PaperRow) -> PaperSummary:
    return PaperSummary(
        id=row.id,
        title=row.title,
        authors=row.authors or UNKNOWN_AUTHOR,
        year=row.year_published,
        abstract=row.abstract,
        views=row.views or 0,
    )


def exemplar_rank(row: PaperRow) -> tuple[int, float]:
    """Sort key for exemplar papers: views (missing = 0), then upload time."""
    uploaded = row.uploaded_at.timestamp() if row.uploaded_at else float("-inf")
    return (row.views or 0, uploaded)


def top_exemplars(rows: Iterable[PaperRow], limit: int) -> List[PaperRow]:
    return sorted(rows, key=exemplar_rank, reverse=True)[:limit]
