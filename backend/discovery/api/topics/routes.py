"""Topics blueprint: browse catalogue built by the topic aggregator."""
from __future__ import annotations

from dataclasses import asdict

from flask import Blueprint, current_app

from ...db.repositories.factory import paper_store
from ...errors import error_response, ok
from ...services.topic_service import TopicService
from .schemas import CategoryOut


bp = Blueprint("topics", __name__)


def _service() -> TopicService:
    return TopicService.from_config(paper_store(), current_app.config)


@bp.get("/")
def list_topics():
    items = [CategoryOut.model_validate(asdict(c)).model_dump() for c in _service().list_topics()]
    return ok(items)


@bp.get("/<slug>")
def get_topic(slug: str):
    category = _service().get_topic(slug)
    if not category:
        return error_response("not_found", f"no topic with slug {slug!r}", 404)
    return ok(CategoryOut.model_validate(asdict(category)).model_dump())
