from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from discovery.db.base import Base
from discovery.db.models.paper import PaperModel
from discovery.db.repositories.paper_repo import PaperRepository
from discovery.errors import StoreUnavailable


@pytest.fixture
def repo():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(engine)
    factory = sessionmaker(bind=engine, expire_on_commit=False)
    with factory() as s:
        s.add_all([
            PaperModel(id="1", title="Kiosk", category="website", year_published=2023, views=5,
                       uploaded_at=datetime(2024, 1, 1)),
            PaperModel(id="2", title="Tutor", authors="Reyes", category="mobile app", year_published=2025,
                       views=None, uploaded_at=datetime(2024, 1, 2)),
            PaperModel(id="3", title="Ledger", category="website", year_published=2024, views=5,
                       uploaded_at=datetime(2024, 1, 3)),
            PaperModel(id="4", title="Blank", category="", year_published=None, views=1,
                       uploaded_at=datetime(2024, 1, 4)),
            PaperModel(id="5", title="Orphan", category=None, year_published=2022, views=0,
                       uploaded_at=datetime(2024, 1, 5)),
            PaperModel(id="6", title="Portal", category="website", year_published=2022, views=0,
                       uploaded_at=datetime(2024, 1, 6)),
        ])
        s.commit()
    yield PaperRepository(factory)
    engine.dispose()


def test_distinct_categories_skip_blank_and_null(repo):
    assert repo.list_distinct_categories() == ["website", "mobile app"]


def test_count_by_category_is_exact_match(repo):
    assert repo.count_by_category("website") == 3
    assert repo.count_by_category("Website") == 0


def test_top_by_category_orders_by_views_then_upload(repo):
    top = repo.top_by_category("website", 2)
    assert [p.id for p in top] == ["3", "1"]


def test_missing_views_decode_as_zero(repo):
    (row,) = repo.top_by_category("mobile app", 3)
    assert row.views == 0
    assert row.authors == "Reyes"


def test_list_all_orders_by_year(repo):
    years = [p.year_published for p in repo.list_all() if p.year_published is not None]
    assert years == sorted(years, reverse=True)
    assert len(repo.list_all()) == 6


def test_get(repo):
    assert repo.get("2").title == "Tutor"
    assert repo.get("missing") is None


def test_database_errors_become_store_unavailable():
    engine = create_engine("sqlite://")  # no tables
    repo = PaperRepository(sessionmaker(bind=engine))
    with pytest.raises(StoreUnavailable):
        repo.list_distinct_categories()
    with pytest.raises(StoreUnavailable):
        repo.list_all()
