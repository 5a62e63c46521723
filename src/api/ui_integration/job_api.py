# src/api/ui_integration/job_api.py
from typing import Any, Dict, List

from src.api.ui_integration.client import ApiClient, unwrap, unwrap_list


def list_jobs(client: ApiClient) -> List[Dict[str, Any]]:
    return unwrap_list(client.get("/jobs"), "jobs")


def get_job(client: ApiClient, job_id: str) -> Dict[str, Any]:
    return unwrap(client.get(f"/jobs/{job_id}"), "job") or {}
