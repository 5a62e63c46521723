# src/api/ui_integration/course_api.py
"""
Course catalog and enrollment endpoints.
Filtering happens server-side: empty filter values are simply not sent.
"""

from typing import Any, Dict, List, Optional

from src.api.ui_integration.client import ApiClient, unwrap, unwrap_list


def list_courses(
    client: ApiClient,
    search: Optional[str] = None,
    category: Optional[str] = None,
    level: Optional[str] = None,
) -> List[Dict[str, Any]]:
    params = {
        k: v
        for k, v in (("search", search), ("category", category), ("level", level))
        if v
    }
    return unwrap_list(client.get("/courses", params=params), "courses")


def get_course(client: ApiClient, course_id: str) -> Dict[str, Any]:
    return unwrap(client.get(f"/courses/{course_id}"), "course") or {}


def list_my_enrollments(client: ApiClient) -> List[Dict[str, Any]]:
    return unwrap_list(client.get("/courses/my/enrollments"), "enrollments")
