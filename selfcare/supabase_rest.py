"""
supabase_rest.py — HTTP-based database client using Supabase's PostgREST API.
Every helper takes plain equality filters; callers are expected to always
include the owning user_id.
"""
import logging
import re
from urllib.parse import quote

import httpx

from selfcare.config import SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY, REQUEST_TIMEOUT
from selfcare.errors import BackendError

logger = logging.getLogger(__name__)

# PostgREST answers a single-object request with this code when the row count is not exactly one
SINGLE_ROW_CODE = "PGRST116"
_ROWS_RE = re.compile(r"(\d+) rows")


class SingleRowError(BackendError):
    """A single-row query matched zero or several rows."""

    def __init__(self, row_count: int | None, message: str):
        super().__init__(message)
        self.row_count = row_count


def _headers(extra: dict = None) -> dict:
    headers = {
        "apikey": SUPABASE_SERVICE_ROLE_KEY,
        "Authorization": f"Bearer {SUPABASE_SERVICE_ROLE_KEY}",
        "Content-Type": "application/json",
        "Prefer": "return=representation",
    }
    if extra:
        headers.update(extra)
    return headers


def _client() -> httpx.Client:
    return httpx.Client(timeout=REQUEST_TIMEOUT)


def _filter_query(filters: dict = None) -> str:
    if not filters:
        return ""
    return "".join(f"&{key}=eq.{quote(str(value))}" for key, value in filters.items())


def _error_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return f"HTTP {resp.status_code}: {resp.text[:200]}"
    if isinstance(body, dict):
        return body.get("message") or body.get("error") or f"HTTP {resp.status_code}"
    return f"HTTP {resp.status_code}"


def _send(method: str, url: str, **kwargs) -> httpx.Response:
    try:
        with _client() as client:
            resp = client.request(method, url, **kwargs)
    except httpx.HTTPError as e:
        logger.error("%s %s failed: %s", method, url, e)
        raise BackendError(str(e) or e.__class__.__name__) from e
    return resp


def _check(resp: httpx.Response) -> None:
    if resp.is_error:
        message = _error_message(resp)
        logger.error("PostgREST %s %s -> %s: %s", resp.request.method, resp.request.url.path, resp.status_code, message)
        raise BackendError(message)


def sb_select(table: str, filters: dict = None, columns: str = "*", query_string: str = None) -> list:
    """Select rows from a table with optional equality filters or raw query."""
    url = f"{SUPABASE_URL}/rest/v1/{table}?select={columns}{_filter_query(filters)}"
    if query_string:
        url += f"&{query_string}"

    resp = _send("GET", url, headers=_headers())
    _check(resp)
    return resp.json()


def sb_select_single(table: str, filters: dict, columns: str = "*") -> dict:
    """
    Select exactly one row.
    Raises SingleRowError when zero or several rows match, BackendError on anything else.
    """
    url = f"{SUPABASE_URL}/rest/v1/{table}?select={columns}{_filter_query(filters)}"
    resp = _send("GET", url, headers=_headers({"Accept": "application/vnd.pgrst.object+json"}))

    if resp.is_error:
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("code") == SINGLE_ROW_CODE:
            match = _ROWS_RE.search(body.get("details") or "")
            row_count = int(match.group(1)) if match else None
            raise SingleRowError(row_count, body.get("message") or "Expected a single row")
        _check(resp)
    return resp.json()


def sb_insert(table: str, data: dict) -> dict:
    """Insert a row and return the created record."""
    url = f"{SUPABASE_URL}/rest/v1/{table}"
    resp = _send("POST", url, json=data, headers=_headers())
    _check(resp)
    result = resp.json()
    return result[0] if isinstance(result, list) and result else {}


def sb_update(table: str, filters: dict, data: dict) -> dict:
    """Update rows matching all filters and return the first updated record."""
    url = f"{SUPABASE_URL}/rest/v1/{table}?{_filter_query(filters).lstrip('&')}"
    resp = _send("PATCH", url, json=data, headers=_headers())
    _check(resp)
    result = resp.json()
    return result[0] if isinstance(result, list) and result else {}


def sb_delete(table: str, filters: dict) -> list:
    """Delete rows matching all filters and return what was removed."""
    url = f"{SUPABASE_URL}/rest/v1/{table}?{_filter_query(filters).lstrip('&')}"
    resp = _send("DELETE", url, headers=_headers())
    _check(resp)
    return resp.json() if resp.content else []
