# src/api/http.py
from __future__ import annotations

from typing import Any

import requests
from requests.exceptions import RequestException

from src.api.errors import FetchError
from src.config import HTTP_TIMEOUT_S, USER_AGENT
from src.utils import report_error


def http_get_json(
    url: str,
    params: dict[str, Any] | None = None,
    timeout: float | None = HTTP_TIMEOUT_S,
) -> Any:
    """GET a JSON document. Single attempt, no retries.

    Raises FetchError with the HTTP status for non-2xx responses and with
    status_code=None when the request itself fails.
    """
    headers = {"User-Agent": USER_AGENT}
    try:
        resp = requests.get(url, params=params, timeout=timeout, headers=headers)
    except RequestException as e:
        report_error(f"http_get_json: {url}", e)
        raise FetchError(f"request failed: {e}") from e

    if not resp.ok:
        err = FetchError(f"HTTP {resp.status_code} from {url}", status_code=resp.status_code)
        report_error(f"http_get_json: {url}", err)
        raise err

    try:
        return resp.json()
    except ValueError as e:
        report_error(f"http_get_json: {url}", e)
        raise FetchError(f"invalid JSON from {url}", status_code=resp.status_code) from e
