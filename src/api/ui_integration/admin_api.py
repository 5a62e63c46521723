# src/api/ui_integration/admin_api.py
"""
Admin moderation endpoints (jobs, reported posts, employers, dashboard).
"""

from typing import Any, Dict, List, Optional

from src.api.ui_integration.client import ApiClient, unwrap, unwrap_list


def get_dashboard(client: ApiClient) -> Dict[str, Any]:
    return unwrap(client.get("/admin/dashboard")) or {}


def list_jobs(client: ApiClient, status: Optional[str] = None) -> List[Dict[str, Any]]:
    params = {"status": status} if status else None
    return unwrap_list(client.get("/admin/jobs", params=params), "jobs")


def approve_job(client: ApiClient, job_id: str):
    return client.put(f"/admin/jobs/{job_id}/approve")


def reject_job(client: ApiClient, job_id: str, reason: str):
    return client.put(f"/admin/jobs/{job_id}/reject", json={"reason": reason})


def delete_job(client: ApiClient, job_id: str):
    return client.delete(f"/admin/jobs/{job_id}")


def list_reported_posts(client: ApiClient) -> List[Dict[str, Any]]:
    return unwrap_list(client.get("/admin/posts/reported"), "posts")


def hide_post(client: ApiClient, post_id: str):
    """Toggles visibility server-side: hides a visible post, unhides a hidden one."""
    return client.put(f"/admin/posts/{post_id}/hide")


def list_employers(client: ApiClient) -> List[Dict[str, Any]]:
    return unwrap_list(client.get("/admin/users", params={"role": "employer"}), "users")


def verify_employer(client: ApiClient, user_id: str):
    return client.put(f"/admin/employers/{user_id}/verify")


def unverify_employer(client: ApiClient, user_id: str):
    return client.put(f"/admin/employers/{user_id}/unverify")
