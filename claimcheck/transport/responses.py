import json
from typing import Any

import httpx


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)


def read_json(response: httpx.Response) -> Any:
    """Decode a JSON body, returning None when the body is empty or not JSON."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def extract_error_message(response: httpx.Response) -> str:
    """Build a readable message for a failed response.

    Sources are checked in order and the first informative one wins:
    ``detail``, ``message``, ``error``, any non-empty body, the status line.
    """
    data = read_json(response)
    if isinstance(data, dict):
        for key in ("detail", "message", "error"):
            value = data.get(key)
            if value not in (None, "", [], {}):
                return _as_text(value)
    if data not in (None, "", [], {}):
        return f"Server error: {_as_text(data)}"
    if data is None and response.text.strip():
        return f"Server error: {response.text.strip()}"
    reason = response.reason_phrase
    return f"HTTP {response.status_code}: {reason}" if reason else f"HTTP {response.status_code}"


def build_http_client(timeout_seconds: float) -> httpx.Client:
    return httpx.Client(
        timeout=timeout_seconds,
        headers={"Accept": "application/json"},
    )
