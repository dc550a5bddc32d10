"""Relevance search and filtering over the paper store."""
from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional

from loguru import logger

from ..db.repositories.store import PaperStore
from ..domain.paper import PaperRow
from ..errors import StoreUnavailable

YEAR_OPTIONS: tuple[int, ...] = (2025, 2024, 2023, 2022)


class SearchStatus(str, Enum):
    OK = "ok"
    FAILED = "failed"
    SUPERSEDED = "superseded"


@dataclass(slots=True)
class SearchResult:
    status: SearchStatus
    papers: List[PaperRow] = field(default_factory=list)
    query: str = ""
    category: str = ""
    year: str = ""
    token: Optional[int] = None

    @property
    def failed(self) -> bool:
        return self.status is SearchStatus.FAILED


class SearchCoordinator:
    """Last-request-wins bookkeeping keyed by client.

    ``begin`` issues a token that is newer than every token issued before it.
    ``settle`` reports whether that token is still the newest for its key;
    a newer ``begin`` for the same key supersedes all older tokens.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tokens = itertools.count(1)
        self._latest: Dict[str, int] = {}

    def begin(self, key: str) -> int:
        with self._lock:
            token = next(self._tokens)
            self._latest[key] = token
            return token

    def settle(self, key: str, token: int) -> bool:
        with self._lock:
            if self._latest.get(key) != token:
                return False
            del self._latest[key]
            return True


def _contains(haystack: Optional[str], needle: str) -> bool:
    return bool(haystack) and needle in haystack.lower()


def filter_and_rank(rows: Iterable[PaperRow], query: str = "", category: str = "", year: str = "") -> List[PaperRow]:
    papers = list(rows)
    if category:
        wanted = category.lower()
        papers = [p for p in papers if p.category and p.category.lower() == wanted]
    if year:
        papers = [p for p in papers if p.year_published is not None and str(p.year_published) == year]
    if not query:
        return papers

    needle = query.lower()
    matches: List[PaperRow] = []
    rest: List[PaperRow] = []
    for p in papers:
        (matches if _contains(p.title, needle) or _contains(p.authors, needle) else rest).append(p)
    return matches + rest


class SearchService:
    def __init__(self, store: PaperStore, coordinator: Optional[SearchCoordinator] = None) -> None:
        self.store = store
        self.coordinator = coordinator

    def search(
        self,
        query: str = "",
        category: str = "",
        year: str = "",
        *,
        client_key: Optional[str] = None,
    ) -> SearchResult:
        query = (query or "").strip()
        category = category or ""
        year = year or ""
        tracked = self.coordinator is not None and client_key is not None
        token = self.coordinator.begin(client_key) if tracked else None

        try:
            rows = self.store.list_all(order_by_year_desc=True)
        except StoreUnavailable as e:
            logger.warning("search retrieval failed: {}", e)
            rows = None

        if tracked and not self.coordinator.settle(client_key, token):
            logger.debug("search token {} for {} superseded", token, client_key)
            return SearchResult(SearchStatus.SUPERSEDED, [], query, category, year, token)
        if rows is None:
            return SearchResult(SearchStatus.FAILED, [], query, category, year, token)
        return SearchResult(SearchStatus.OK, filter_and_rank(rows, query, category, year), query, category, year, token)


search_coordinator = SearchCoordinator()
