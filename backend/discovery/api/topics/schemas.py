"""Pydantic response schemas for Topics API."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class PaperSummaryOut(BaseModel):
    id: str
    title: Optional[str]
    authors: str
    year: Optional[int]
    abstract: Optional[str]
    views: int


class CategoryOut(BaseModel):
    slug: str
    display_name: str
    raw_name: str
    paper_count: int
    top_papers: List[PaperSummaryOut]
