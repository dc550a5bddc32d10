"""Paper detail lookups behind the access gate."""
from __future__ import annotations

from typing import Optional

from ..db.repositories.store import PaperStore
from ..domain.paper import PaperRow


class PaperService:
    def __init__(self, store: PaperStore) -> None:
        self.store = store

    def get_paper(self, paper_id: str) -> Optional[PaperRow]:
        return self.store.get(paper_id)
