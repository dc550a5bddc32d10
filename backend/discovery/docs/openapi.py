"""Builds a minimal OpenAPI spec from existing Pydantic schemas."""
from __future__ import annotations

from typing import Any, Dict

from flask import request

from ..api.papers.schemas import FilterOptionsOut, PaperDetailOut, SearchResultOut
from ..api.topics.schemas import CategoryOut


def _schemas() -> Dict[str, Any]:
    models = {
        "CategoryOut": CategoryOut,
        "SearchResultOut": SearchResultOut,
        "PaperDetailOut": PaperDetailOut,
        "FilterOptionsOut": FilterOptionsOut,
    }
    schemas: Dict[str, Any] = {}
    for name, model in models.items():
        schema = model.model_json_schema(ref_template="#/components/schemas/{model}")
        schemas.update(schema.pop("$defs", {}))
        schemas[name] = schema
    return schemas


def _data(ref: str, array: bool = False) -> Dict[str, Any]:
    item = {"$ref": f"#/components/schemas/{ref}"}
    return {
        "application/json": {
            "schema": {
                "type": "object",
                "properties": {"data": {"type": "array", "items": item} if array else item},
            }
        }
    }


def _query(name: str, description: str) -> Dict[str, Any]:
    return {"name": name, "in": "query", "required": False, "schema": {"type": "string"}, "description": description}


def build_openapi() -> Dict[str, Any]:
    base_url = f"{request.scheme}://{request.host}"
    return {
        "openapi": "3.0.3",
        "info": {"title": "Capstone Discovery API", "version": "0.1.0"},
        "servers": [{"url": base_url}],
        "tags": [{"name": "Health"}, {"name": "Topics"}, {"name": "Papers"}],
        "paths": {
            "/api/health/": {
                "get": {"tags": ["Health"], "summary": "Liveness probe", "responses": {"200": {"description": "OK"}}}
            },
            "/api/health/store": {
                "get": {"tags": ["Health"], "summary": "Paper store readiness", "responses": {"200": {"description": "Ready"}, "503": {"description": "Store unreachable"}}}
            },
            "/api/topics/": {
                "get": {
                    "tags": ["Topics"], "summary": "Category catalogue with top papers",
                    "responses": {"200": {"description": "OK", "content": _data("CategoryOut", array=True)}},
                }
            },
            "/api/topics/{slug}": {
                "parameters": [{"name": "slug", "in": "path", "required": True, "schema": {"type": "string"}}],
                "get": {
                    "tags": ["Topics"], "summary": "Single category by slug",
                    "responses": {
                        "200": {"description": "OK", "content": _data("CategoryOut")},
                        "404": {"description": "Unknown slug"},
                    },
                },
            },
            "/api/papers/search": {
                "get": {
                    "tags": ["Papers"], "summary": "Filter by category/year, matches on title or authors first",
                    "parameters": [
                        _query("query", "Case-insensitive substring of title or authors"),
                        _query("category", "Raw category, compared case-insensitively"),
                        _query("year", "Publication year"),
                        _query("search_session", "Client search session; a newer search in the same session supersedes older ones"),
                    ],
                    "responses": {
                        "200": {"description": "OK", "content": _data("SearchResultOut")},
                        "503": {"description": "Paper retrieval failed"},
                    },
                }
            },
            "/api/papers/filters": {
                "get": {
                    "tags": ["Papers"], "summary": "Category and year filter options",
                    "responses": {"200": {"description": "OK", "content": _data("FilterOptionsOut")}},
                }
            },
            "/api/papers/{paper_id}": {
                "parameters": [{"name": "paper_id", "in": "path", "required": True, "schema": {"type": "string"}}],
                "get": {
                    "tags": ["Papers"], "summary": "Full paper detail (login required)",
                    "security": [{"BearerAuth": []}],
                    "responses": {
                        "200": {"description": "OK", "content": _data("PaperDetailOut")},
                        "401": {"description": "Authentication required"},
                        "404": {"description": "Not found"},
                    },
                },
            },
        },
        "components": {
            "schemas": _schemas(),
            "securitySchemes": {"BearerAuth": {"type": "http", "scheme": "bearer", "bearerFormat": "JWT"}},
        },
    }
