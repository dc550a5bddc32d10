"""Supabase-backed paper store using supabase-py v2."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from loguru import logger
from supabase import Client

from ...domain.paper import PaperRow, top_exemplars
from ...errors import StoreUnavailable

_ROW_COLUMNS = "id, title, authors, abstract, category, year_published, views, uploaded_at"

# PostgREST caps each response at its max-rows setting (1000 by default)
PAGE_SIZE = 1000


def _as_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _as_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


def _row_to_dc(row: Dict[str, Any]) -> PaperRow:
    return PaperRow(
        id=str(row.get("id")),
        title=row.get("title"),
        authors=row.get("authors"),
        abstract=row.get("abstract"),
        category=row.get("category"),
        year_published=_as_int(row.get("year_published")),
        views=_as_int(row.get("views")) or 0,
        uploaded_at=_as_datetime(row.get("uploaded_at")),
    )


class PaperRepositorySupabase:
    def __init__(self, client: Client, table_name: str = "research_papers", page_size: int = PAGE_SIZE) -> None:
        self.client = client
        self.table_name = table_name
        self.page_size = page_size

    def _execute(self, op: str, query):
        try:
            return query.execute()
        except Exception as e:
            logger.warning("supabase {} on {} failed: {}", op, self.table_name, e)
            raise StoreUnavailable(f"{op}: {e}") from e

    def _select(self, columns: str, **kwargs):
        return self.client.table(self.table_name).select(columns, **kwargs)

    def _fetch_all(self, op: str, build) -> List[Dict[str, Any]]:
        """Page through ``build()`` with ``range`` until a short page comes back."""
        rows: List[Dict[str, Any]] = []
        start = 0
        while True:
            page = self._execute(op, build().range(start, start + self.page_size - 1)).data or []
            rows.extend(page)
            if len(page) < self.page_size:
                return rows
            start += self.page_size

    def list_distinct_categories(self) -> List[str]:
        rows = self._fetch_all(
            "list_distinct_categories",
            lambda: self._select("category")
            .neq("category", "")
            .not_.is_("category", "null")
            .order("uploaded_at")
            .order("id"),
        )
        return list(dict.fromkeys(r["category"] for r in rows if r.get("category")))

    def count_by_category(self, raw: str) -> int:
        q = self._select("id", count="exact").eq("category", raw).limit(1)
        return self._execute("count_by_category", q).count or 0

    def top_by_category(self, raw: str, limit: int) -> List[PaperRow]:
        # PostgREST cannot order by coalesce(views, 0), so rank the whole category here
        rows = self._fetch_all(
            "top_by_category",
            lambda: self._select(_ROW_COLUMNS).eq("category", raw).order("id"),
        )
        return top_exemplars((_row_to_dc(r) for r in rows), limit)

    def list_all(self, order_by_year_desc: bool = True) -> List[PaperRow]:
        def build():
            q = self._select(_ROW_COLUMNS)
            if order_by_year_desc:
                q = q.order("year_published", desc=True).order("uploaded_at", desc=True)
            return q.order("id")

        rows = self._fetch_all("list_all", build)
        return [_row_to_dc(r) for r in rows]

    def get(self, paper_id: str) -> Optional[PaperRow]:
        q = self._select("*").eq("id", paper_id).limit(1)
        rows = self._execute("get", q).data or []
        return _row_to_dc(rows[0]) if rows else None
