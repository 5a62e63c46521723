# src/api/ui_integration/auth_api.py
"""
Auth API wrappers.
Functions return normalized payloads or raise RequestError.
"""

from typing import Any, Dict, Tuple

from src.api.ui_integration.client import ApiClient, RequestError


def login(client: ApiClient, email: str, password: str) -> Tuple[str, Dict[str, Any]]:
    """POST /auth/login -> (token, user record)."""
    body = client.post("/auth/login", json={"email": email, "password": password})
    if not isinstance(body, dict):
        raise RequestError("Login succeeded but server returned unexpected payload.")
    # common token keys: token, access_token
    data = body.get("data") if isinstance(body.get("data"), dict) else {}
    token = body.get("token") or body.get("access_token") or data.get("token")
    user = body.get("user") or data.get("user")
    if not token or not isinstance(user, dict):
        raise RequestError("Login response did not contain a token and user.")
    return token, user


def logout(client: ApiClient):
    return client.post("/auth/logout")
