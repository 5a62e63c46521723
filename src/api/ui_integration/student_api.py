# src/api/ui_integration/student_api.py
from typing import Any, Dict

from src.api.ui_integration.client import ApiClient, unwrap


def get_profile(client: ApiClient) -> Dict[str, Any]:
    return unwrap(client.get("/students/profile"), "profile")
