"""Store error type, global HTTP error handling and JSON response helpers."""
from __future__ import annotations

from typing import Any

from flask import Flask, jsonify
from loguru import logger
from pydantic import ValidationError


class StoreUnavailable(Exception):
    """Raised when the paper store cannot answer a query (network, auth, timeout)."""


def error_response(error: str, message: str, status: int, **extra: Any):
    body = {"error": error, "message": message}
    body.update(extra)
    return jsonify(body), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(400)
    def bad_request(err: Exception):  # type: ignore[override]
        return error_response("bad_request", str(err), 400)

    @app.errorhandler(401)
    def unauthorized(err: Exception):  # type: ignore[override]
        return error_response("authentication_required", str(err), 401)

    @app.errorhandler(404)
    def not_found(err: Exception):  # type: ignore[override]
        return error_response("not_found", str(err), 404)

    @app.errorhandler(ValidationError)
    def invalid_params(err: ValidationError):  # type: ignore[override]
        return error_response("unprocessable_entity", str(err), 422)

    @app.errorhandler(StoreUnavailable)
    def store_unavailable(err: StoreUnavailable):  # type: ignore[override]
        logger.error("paper store unavailable: {}", err)
        return error_response("store_unavailable", "paper store is unavailable", 503)

    @app.errorhandler(500)
    def internal(err: Exception):  # type: ignore[override]
        return error_response("internal_server_error", "unexpected error", 500)


def ok(data: Any, status: int = 200):
    return jsonify({"data": data}), status
