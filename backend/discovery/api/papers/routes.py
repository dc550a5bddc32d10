"""Papers blueprint: search, filter options and gated detail."""
from __future__ import annotations

from dataclasses import asdict

from flask import Blueprint, current_app, request

from ...auth.session import current_session
from ...db.repositories.factory import paper_store
from ...errors import error_response, ok
from ...services.access_gate import access_gate
from ...services.paper_service import PaperService
from ...services.search_service import YEAR_OPTIONS, SearchResult, SearchService, SearchStatus, search_coordinator
from ...services.topic_service import TopicService
from .schemas import FilterOptionsOut, PaperDetailOut, SearchHitOut, SearchQueryIn, SearchResultOut


bp = Blueprint("papers", __name__)

SEARCH_SESSION_HEADER = "X-Search-Session"


def _result_out(result: SearchResult) -> dict:
    return SearchResultOut(
        status=result.status.value,
        query=result.query,
        category=result.category,
        year=result.year,
        total=len(result.papers),
        items=[SearchHitOut.model_validate(asdict(p)) for p in result.papers],
    ).model_dump()


def _search_key(search_session: str, user_id: str | None) -> str | None:
    """Last-request-wins key: one per client search session, never shared across visitors."""
    sid = search_session or request.headers.get(SEARCH_SESSION_HEADER, "").strip()
    if sid:
        return f"session:{sid}"
    if user_id:
        return f"user:{user_id}"
    return None


@bp.get("/search")
def search_papers():
    params = SearchQueryIn.model_validate(request.args.to_dict())
    session = current_session()
    svc = SearchService(paper_store(), search_coordinator)
    result = svc.search(
        params.query,
        params.category,
        params.year,
        client_key=_search_key(params.search_session, session.user_id),
    )
    if result.status is SearchStatus.FAILED:
        return error_response("search_failed", "paper retrieval failed, try again", 503, data=_result_out(result))
    return ok(_result_out(result))


@bp.get("/filters")
def filter_options():
    svc = TopicService.from_config(paper_store(), current_app.config)
    out = FilterOptionsOut(
        categories=[{"value": c.raw_name, "label": c.display_name} for c in svc.list_topics()],
        years=list(YEAR_OPTIONS),
    )
    return ok(out.model_dump())


@bp.get("/<paper_id>")
def get_paper(paper_id: str):
    session = current_session()
    decision = access_gate.view_detail(session.is_authenticated, lambda: PaperService(paper_store()).get_paper(paper_id))
    if not decision.allowed:
        return error_response(decision.reason, "log in to view this paper", 401)
    if decision.value is None:
        return error_response("not_found", f"no paper with id {paper_id!r}", 404)
    return ok(PaperDetailOut.model_validate(asdict(decision.value)).model_dump(mode="json"))
