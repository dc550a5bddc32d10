"""Topic aggregation: builds the category catalogue from the paper store.

Every call recomputes the catalogue from scratch. Store failures never
escape: an unreachable store yields the fixed default catalogue, and a
category whose own queries fail is kept with a zero count and no exemplars.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Mapping, Optional

from loguru import logger

from ..db.repositories.store import PaperStore
from ..domain.categories import default_catalogue, normalize
from ..domain.paper import Category, summarize
from ..errors import StoreUnavailable


class TopicService:
    def __init__(self, store: PaperStore, *, top_limit: int = 3, max_workers: int = 8) -> None:
        self.store = store
        self.top_limit = top_limit
        self.max_workers = max(1, max_workers)

    @classmethod
    def from_config(cls, store: PaperStore, config: Mapping[str, Any]) -> TopicService:
        return cls(
            store,
            top_limit=config.get("TOP_PAPERS_LIMIT", 3),
            max_workers=config.get("AGGREGATION_MAX_WORKERS", 8),
        )

    def list_topics(self) -> List[Category]:
        try:
            raw_names = self.store.list_distinct_categories()
        except StoreUnavailable as e:
            logger.warning("category listing failed, serving default catalogue: {}", e)
            return default_catalogue()

        raw_names = list(dict.fromkeys(name for name in raw_names if name))
        if not raw_names:
            logger.info("paper store has no categories, serving default catalogue")
            return default_catalogue()

        workers = min(self.max_workers, len(raw_names))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="topics") as pool:
            # map() yields in submission order, so first-seen order is kept
            return list(pool.map(self._build_category, raw_names))

    def get_topic(self, slug: str) -> Optional[Category]:
        for category in self.list_topics():
            if category.slug == slug:
                return category
        return None

    def _build_category(self, raw: str) -> Category:
        category = normalize(raw)
        try:
            count = self.store.count_by_category(raw)
            rows = self.store.top_by_category(raw, self.top_limit)
        except StoreUnavailable as e:
            logger.warning("category {!r} degraded to empty: {}", raw, e)
            return category

        category.paper_count = max(0, count)
        category.top_papers = [summarize(r) for r in rows[: min(self.top_limit, category.paper_count)]]
        return category
