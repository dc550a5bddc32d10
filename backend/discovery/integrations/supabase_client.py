"""Supabase read client for the paper store, as a Flask extension."""
from __future__ import annotations

from typing import Dict, Optional

from flask import Flask
from loguru import logger
from supabase import Client, create_client


class SupabaseExt:
    """Holds one client for reading the papers table.

    The service-role key wins over the anon key when both are configured,
    so row-level security on ``research_papers`` never hides rows from the
    catalogue.
    """

    def __init__(self) -> None:
        self.client: Optional[Client] = None
        self.key_kind: Optional[str] = None

    def init_app(self, app: Flask) -> None:
        self.client, self.key_kind = None, None
        url = app.config.get("SUPABASE_URL")
        if not url:
            return
        for kind, key in (("service", app.config.get("SUPABASE_SERVICE_ROLE_KEY")),
                          ("anon", app.config.get("SUPABASE_ANON_KEY"))):
            if key:
                self.client, self.key_kind = create_client(url, key), kind
                logger.info("supabase client ready with {} key", kind)
                return
        logger.warning("SUPABASE_URL is set but no key was provided; supabase store disabled")

    def status(self) -> Dict[str, object]:
        return {"initialized": self.client is not None, "key": self.key_kind}


supabase_ext = SupabaseExt()
