"""Shared helpers for route blueprints."""

from __future__ import annotations

from typing import Any, Dict

from flask import jsonify, request

__all__ = ["json_error", "request_payload"]


def json_error(message: str, *, status: int = 500):
    """Return a JSON error response carrying an ``error`` string."""
    return jsonify({"error": message}), status


def request_payload() -> Dict[str, Any]:
    """Return the JSON body of the current request, or an empty dict."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return {}
    return payload
