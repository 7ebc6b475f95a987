from __future__ import annotations

from typing import Any


def success_response(data: Any, meta: dict | None = None) -> dict:
    return {"success": True, "data": data, "meta": meta or {}}


def error_response(code: str, message: str) -> dict:
    return {"success": False, "error": {"code": code, "message": message}}
