"""Pydantic request/response schemas for Papers API."""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class SearchQueryIn(BaseModel):
    query: str = ""
    category: str = ""
    year: str = ""
    search_session: str = Field(default="", max_length=128)

    @field_validator("query", "search_session")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()


class SearchHitOut(BaseModel):
    id: str
    title: Optional[str]
    authors: Optional[str]
    abstract: Optional[str]
    category: Optional[str]
    year_published: Optional[int]


class SearchResultOut(BaseModel):
    status: str
    query: str
    category: str
    year: str
    total: int
    items: List[SearchHitOut]


class PaperDetailOut(SearchHitOut):
    views: int
    uploaded_at: Optional[datetime]


class CategoryOptionOut(BaseModel):
    value: str
    label: str


class FilterOptionsOut(BaseModel):
    categories: List[CategoryOptionOut]
    years: List[int]
