"""Research paper ORM model for the repository table."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from ..base import Base


class PaperModel(Base):
    __tablename__ = "research_papers"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)  # UUID string
    title: Mapped[Optional[str]] = mapped_column(String(500), default=None)
    authors: Mapped[Optional[str]] = mapped_column(Text, default=None)
    abstract: Mapped[Optional[str]] = mapped_column(Text, default=None)
    category: Mapped[Optional[str]] = mapped_column(String(255), default=None, index=True)
    year_published: Mapped[Optional[int]] = mapped_column(Integer, default=None)
    views: Mapped[Optional[int]] = mapped_column(Integer, default=0)

    uploaded_at: Mapped[datetime] = mapped_column(default=func.now(), nullable=False)
