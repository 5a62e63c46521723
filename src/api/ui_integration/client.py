# src/api/ui_integration/client.py
"""
Thin HTTP client for the platform REST backend.
One call -> one request: no retries, no caching. Every failure (network or
non-2xx) surfaces as RequestError carrying the backend message when present.
"""

import logging
from typing import Any, Dict, MutableMapping, Optional

import requests

from src.ui.session import TOKEN_KEY, clear_session

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong. Please try again."


class RequestError(Exception):
    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        payload: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


def _error_message(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        msg = body.get("message") or body.get("error") or body.get("detail")
        if msg:
            return str(msg)
    return f"Request failed (status={resp.status_code})"


def unwrap(body: Any, *keys: str) -> Any:
    """
    Backend responses look like {success, message, data, ...}. Return `data`,
    else the first of `keys` present, else the body itself.
    """
    if not isinstance(body, dict):
        return body
    if body.get("data") is not None:
        return body["data"]
    for k in keys:
        if body.get(k) is not None:
            return body[k]
    return body


def unwrap_list(body: Any, *keys: str) -> list:
    data = unwrap(body, *keys)
    if isinstance(data, dict):
        for k in keys:
            if isinstance(data.get(k), list):
                return data[k]
        return []
    return list(data or [])


class ApiClient:
    def __init__(
        self,
        base_url: str,
        timeout: int = 30,
        store: Optional[MutableMapping] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.store = store if store is not None else {}
        self.http = session or requests.Session()

    def detached(self) -> "ApiClient":
        """
        Copy with a private store holding only the current token, for use
        from worker threads (the session store is tied to the script thread).
        A 401 seen by the copy does not clear the real session; callers do that.
        """
        return ApiClient(
            self.base_url,
            timeout=self.timeout,
            store={TOKEN_KEY: self.store.get(TOKEN_KEY)},
        )

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = self.store.get(TOKEN_KEY)
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s params=%s", method, path, params)
        try:
            resp = self.http.request(
                method,
                url,
                params=params or None,
                json=json,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise RequestError(f"Network error: {e}") from e

        if resp.status_code == 401:
            # token expired/invalid -> drop the whole session
            clear_session(self.store)

        if not resp.ok:
            msg = _error_message(resp)
            logger.warning("%s %s -> %s: %s", method, path, resp.status_code, msg)
            try:
                payload = resp.json()
            except ValueError:
                payload = resp.text
            raise RequestError(msg, status_code=resp.status_code, payload=payload)

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            raise RequestError(
                "Server returned an unexpected payload.", status_code=resp.status_code
            )

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("PUT", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)
