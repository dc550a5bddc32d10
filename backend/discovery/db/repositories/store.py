"""Read-only paper store interface shared by the repository backends."""
from __future__ import annotations

from typing import List, Optional, Protocol

from ...domain.paper import PaperRow


class PaperStore(Protocol):
    def list_distinct_categories(self) -> List[str]: ...

    def count_by_category(self, raw: str) -> int: ...

    def top_by_category(self, raw: str, limit: int) -> List[PaperRow]: ...

    def list_all(self, order_by_year_desc: bool = True) -> List[PaperRow]: ...

    def get(self, paper_id: str) -> Optional[PaperRow]: ...
