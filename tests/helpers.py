"""Shared helpers for unit tests."""

from __future__ import annotations

from typing import Any, Dict, Optional
from unittest.mock import Mock


TEST_API_BASE = "https://loco.example/api/graphql"


def make_response(
    body: Optional[Any] = None,
    *,
    status_code: int = 200,
    json_error: Optional[Exception] = None,
) -> Mock:
    """Build a fake ``requests.Response``."""
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = "" if body is None else str(body)
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    return response


def products_body(edges: list, **page_info: Any) -> Dict[str, Any]:
    info = {"hasNextPage": False, "endCursor": None, "count": len(edges), "total": len(edges)}
    info.update(page_info)
    return {"data": {"products": {"edges": edges, "pageInfo": info}}}
