# src/api/ui_integration/post_api.py
from typing import Any, Dict, List

from src.api.ui_integration.client import ApiClient, unwrap, unwrap_list


def list_feed(client: ApiClient, page: int = 1, limit: int = 10) -> List[Dict[str, Any]]:
    body = client.get("/posts/feed", params={"page": page, "limit": limit})
    return unwrap_list(body, "posts")


def delete_post(client: ApiClient, post_id: str):
    return client.delete(f"/posts/{post_id}")


def get_post(client: ApiClient, post_id: str) -> Dict[str, Any]:
    return unwrap(client.get(f"/posts/{post_id}"), "post") or {}
