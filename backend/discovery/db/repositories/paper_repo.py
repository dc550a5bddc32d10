"""SQLAlchemy-backed paper store returning dataclasses."""
from __future__ import annotations

from typing import Callable, List, Optional

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.paper import PaperModel
from ...domain.paper import PaperRow
from ...errors import StoreUnavailable


def _to_dc(m: PaperModel) -> PaperRow:
    return PaperRow(
        id=m.id,
        title=m.title,
        authors=m.authors,
        abstract=m.abstract,
        category=m.category,
        year_published=m.year_published,
        views=m.views or 0,
        uploaded_at=m.uploaded_at,
    )


class PaperRepository:
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self.session_factory = session_factory

    def _run(self, op: str, fn):
        try:
            with self.session_factory() as session:
                return fn(session)
        except SQLAlchemyError as e:
            logger.warning("{} failed: {}", op, e)
            raise StoreUnavailable(f"{op}: {e}") from e

    def list_distinct_categories(self) -> List[str]:
        stmt = (
            select(PaperModel.category)
            .where(PaperModel.category.is_not(None), PaperModel.category != "")
            .order_by(PaperModel.uploaded_at, PaperModel.id)
        )
        rows = self._run("list_distinct_categories", lambda s: s.scalars(stmt).all())
        return list(dict.fromkeys(rows))

    def count_by_category(self, raw: str) -> int:
        stmt = select(func.count(PaperModel.id)).where(PaperModel.category == raw)
        return self._run("count_by_category", lambda s: s.scalar(stmt)) or 0

    def top_by_category(self, raw: str, limit: int) -> List[PaperRow]:
        stmt = (
            select(PaperModel)
            .where(PaperModel.category == raw)
            .order_by(
                func.coalesce(PaperModel.views, 0).desc(),
                PaperModel.uploaded_at.desc(),
            )
            .limit(limit)
        )
        return self._run("top_by_category", lambda s: [_to_dc(m) for m in s.scalars(stmt).all()])

    def list_all(self, order_by_year_desc: bool = True) -> List[PaperRow]:
        stmt = select(PaperModel)
        if order_by_year_desc:
            stmt = stmt.order_by(PaperModel.year_published.desc(), PaperModel.uploaded_at.desc())
        return self._run("list_all", lambda s: [_to_dc(m) for m in s.scalars(stmt).all()])

    def get(self, paper_id: str) -> Optional[PaperRow]:
        def _get(session: Session) -> Optional[PaperRow]:
            m = session.get(PaperModel, paper_id)
            return _to_dc(m) if m else None

        return self._run("get", _get)
