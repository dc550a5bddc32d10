from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, List, Optional

import pytest

from discovery import create_app
from discovery.auth.session import encode
from discovery.config import TestingConfig
from discovery.db.base import Base
from discovery.db.models.paper import PaperModel
from discovery.db.session import db
from discovery.domain.paper import PaperRow, top_exemplars
from discovery.errors import StoreUnavailable

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_row(id: str, minutes: int = 0, **fields) -> PaperRow:
    fields.setdefault("uploaded_at", BASE_TIME + timedelta(minutes=minutes))
    return PaperRow(id=id, **fields)


class FakePaperStore:
    """In-memory PaperStore; ``fail`` holds op names or (op, arg) pairs that raise."""

    def __init__(self, rows: Iterable[PaperRow] = (), fail: Iterable = (), categories: Optional[List[str]] = None):
        self.rows = list(rows)
        self.fail = set(fail)
        self.categories = categories
        self.calls: list = []

    def _check(self, op: str, *args) -> None:
        self.calls.append((op, *args))
        if op in self.fail or (op, *args) in self.fail:
            raise StoreUnavailable(f"{op} unavailable")

    def list_distinct_categories(self) -> List[str]:
        self._check("list_distinct_categories")
        if self.categories is not None:
            return list(self.categories)
        return list(dict.fromkeys(r.category for r in self.rows if r.category))

    def count_by_category(self, raw: str) -> int:
        self._check("count_by_category", raw)
        return sum(1 for r in self.rows if r.category == raw)

    def top_by_category(self, raw: str, limit: int) -> List[PaperRow]:
        self._check("top_by_category", raw)
        return top_exemplars([r for r in self.rows if r.category == raw], limit)

    def list_all(self, order_by_year_desc: bool = True) -> List[PaperRow]:
        self._check("list_all")
        rows = list(self.rows)
        if order_by_year_desc:
            rows.sort(key=lambda r: (r.year_published is not None, r.year_published or 0), reverse=True)
        return rows

    def get(self, paper_id: str) -> Optional[PaperRow]:
        self._check("get", paper_id)
        return next((r for r in self.rows if r.id == paper_id), None)


@pytest.fixture
def app():
    app = create_app(TestingConfig())
    Base.metadata.create_all(db.engine)
    yield app
    Base.metadata.drop_all(db.engine)
    db.teardown()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seed(app):
    def _seed(*models: PaperModel) -> None:
        with db.session_factory() as session:
            session.add_all(models)
            session.commit()

    return _seed


@pytest.fixture
def auth_headers(app):
    with app.app_context():
        token = encode({"sub": "student-1", "role": "student"})
    return {"Authorization": f"Bearer {token}"}
