"""
Request validation helpers.

Body validation is declared on the pydantic schemas; this module turns
validation failures into the API's `400 {"error": "msg,msg"}` shape and
provides the permissive pagination query dependency.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from fastapi import Query, Request

from taskboard.core.errors import ValidationError

FIELD_LABELS = {
    "title": "Title",
    "description": "Description",
    "dueDate": "Due date",
    "body": "Request body",
    "page": "Page",
    "limit": "Limit",
}

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int_or_default(raw: Optional[str], default: int) -> int:
    """
    Parse the leading integer of `raw`, falling back to `default`.

    Absent, non-numeric and zero values all yield the default; this never
    raises.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return default
    return int(match.group(1)) or default


def _label(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    if not parts:
        return FIELD_LABELS["body"]
    name = parts[-1]
    return FIELD_LABELS.get(name, name)


def format_validation_error(error: Dict[str, Any]) -> str:
    """Human readable message for one pydantic error entry."""
    error_type = error.get("type", "")
    label = _label(error.get("loc", ()))

    if error_type == "missing":
        return f"{label} is required"
    if error_type == "json_invalid":
        return "Request body must be valid JSON"
    if error_type in ("model_attributes_type", "dict_type"):
        return "Request body must be a JSON object"
    if error_type == "string_type":
        return f"{label} must be a string"
    if error_type.startswith("datetime") or error_type.startswith("date_"):
        return f"{label} must be a valid ISO-8601 date"
    if error_type == "title_empty":
        return error.get("msg", "Title must not be empty")
    return f"{label}: {error.get('msg', 'invalid value')}"


def format_validation_errors(errors: Iterable[Dict[str, Any]]) -> List[str]:
    messages = []
    for error in errors:
        message = format_validation_error(error)
        # pydantic can report the same field more than once
        if message not in messages:
            messages.append(message)
    return messages


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int


async def pagination_params(
    request: Request,
    page: Optional[str] = Query(default=None, description="1-indexed page number"),
    limit: Optional[str] = Query(default=None, description="Page size"),
) -> Pagination:
    """
    Resolve `page`/`limit` query parameters.

    Raises:
        ValidationError: For negative values
    """
    settings = request.app.state.settings
    resolved_page = parse_int_or_default(page, 1)
    resolved_limit = parse_int_or_default(limit, settings.default_page_limit)

    messages = []
    if resolved_page < 1:
        messages.append("Page must be a positive integer")
    if resolved_limit < 1:
        messages.append("Limit must be a positive integer")
    if messages:
        raise ValidationError(messages)

    return Pagination(page=resolved_page, limit=resolved_limit)
