"""
Central shared context for UI modules.
- Load frontend config (env or streamlit secrets) once.
- Page keys and navigation helpers (navigate, nav_param, safe_rerun).
- Build the API client bound to the current browser session.
Other modules should import only from this file, e.g.:
    from src.ui.context import st, navigate, safe_rerun, LOGIN
"""

# Public imports (import once here and reuse)
import streamlit as st
import os
from typing import Any, MutableMapping

from src.core.config import settings
from src.api.ui_integration.client import ApiClient
from src.ui.list_view import invalidate_all
from src.ui.routes import (
    HOME,
    LOGIN,
    JOBS,
    JOB_DETAIL,
    COURSES,
    COURSE_DETAIL,
    POST_DETAIL,
    MY_COURSES,
    ADMIN_DASHBOARD,
    ADMIN_JOBS,
    ADMIN_POSTS,
    ADMIN_EMPLOYERS,
    ROLE_HOME,
)


# Config helper (env -> st.secrets -> default)
def _get_secret(key: str, default):
    val = os.getenv(key.upper())
    if val:
        return val
    try:
        s = st.secrets.get(key)
        if s:
            return s
    except Exception:
        # no secrets.toml configured
        pass
    return default


# Shared configuration variables (loaded once)
API_BASE: str = _get_secret("api_url", settings.API_URL)
try:
    TIMEOUT: int = int(_get_secret("request_timeout", settings.REQUEST_TIMEOUT))
except ValueError:
    TIMEOUT = settings.REQUEST_TIMEOUT


def navigate(store: MutableMapping, page: str, **params: Any):
    """Client-side route push: the router reads store['page'] on the next run.
    Lists are marked stale so the page being entered shows fresh data.
    """
    invalidate_all(store)
    store["page"] = page
    store["nav_params"] = dict(params)


def nav_param(store: MutableMapping, name: str, default=None):
    return (store.get("nav_params") or {}).get(name, default)


def safe_rerun():
    """
    Force a rerun so navigation and refreshed lists show immediately.
    st.rerun raises a control-flow exception that Streamlit handles itself;
    older releases only ship experimental_rerun.
    """
    if hasattr(st, "rerun"):
        st.rerun()
    elif hasattr(st, "experimental_rerun"):
        st.experimental_rerun()


def get_client() -> ApiClient:
    return ApiClient(API_BASE, timeout=TIMEOUT, store=st.session_state)


# Exported names for convenience (explicit)
__all__ = [
    "st",
    "settings",
    "API_BASE",
    "TIMEOUT",
    "HOME",
    "LOGIN",
    "JOBS",
    "JOB_DETAIL",
    "COURSES",
    "COURSE_DETAIL",
    "POST_DETAIL",
    "MY_COURSES",
    "ADMIN_DASHBOARD",
    "ADMIN_JOBS",
    "ADMIN_POSTS",
    "ADMIN_EMPLOYERS",
    "ROLE_HOME",
    "navigate",
    "nav_param",
    "safe_rerun",
    "get_client",
    "_get_secret",
]
