"""Liveness and paper-store readiness endpoints."""
from __future__ import annotations

from flask import Blueprint, current_app

from ...db.repositories.factory import paper_store
from ...errors import StoreUnavailable, error_response, ok
from ...integrations.supabase_client import supabase_ext


bp = Blueprint("health", __name__)


@bp.get("/")
def alive():
    return ok({"status": "ok"})


@bp.get("/store")
def store_ready():
    backend = current_app.config.get("PAPER_REPO_BACKEND")
    body = {"backend": backend, "supabase": supabase_ext.status()}
    try:
        body["categories"] = len(paper_store().list_distinct_categories())
    except (StoreUnavailable, RuntimeError) as e:
        return error_response("store_unavailable", str(e), 503, data=body)
    return ok(body)
