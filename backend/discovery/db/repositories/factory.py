"""Paper store factory (supabase|sqlalchemy)."""
from __future__ import annotations

from flask import current_app

from .paper_repo import PaperRepository as SQLARepo
from .paper_repo_supabase import PaperRepositorySupabase
from .store import PaperStore
from ..session import db
from ...integrations.supabase_client import supabase_ext


def paper_store() -> PaperStore:
    backend = (current_app.config.get("PAPER_REPO_BACKEND") or "supabase").lower()
    if backend == "supabase":
        client = supabase_ext.client
        if client is None:
            raise RuntimeError("Supabase client is not initialized; set SUPABASE_URL and a key.")
        return PaperRepositorySupabase(client, current_app.config.get("PAPERS_TABLE", "research_papers"))
    if backend == "sqlalchemy":
        if db.session_factory is None:
            raise RuntimeError("SQLAlchemy paper store requires an initialized database")
        return SQLARepo(db.session_factory)
    raise ValueError(f"unsupported paper repo backend: {backend}")
