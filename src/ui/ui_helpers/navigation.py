# src/ui/ui_helpers/navigation.py
from typing import List, MutableMapping, Optional, Tuple

from src.ui.context import (
    st,
    safe_rerun,
    navigate,
    settings,
    HOME,
    LOGIN,
    JOBS,
    COURSES,
    MY_COURSES,
    ADMIN_DASHBOARD,
    ADMIN_JOBS,
    ADMIN_POSTS,
    ADMIN_EMPLOYERS,
)
from src.ui.session import SessionContext

PUBLIC_LINKS = [(HOME, "Home"), (JOBS, "Jobs"), (COURSES, "Courses")]
ROLE_LINKS = {
    "student": [(MY_COURSES, "My Courses")],
    "admin": [
        (ADMIN_DASHBOARD, "Admin Dashboard"),
        (ADMIN_JOBS, "Manage Jobs"),
        (ADMIN_POSTS, "Manage Posts"),
        (ADMIN_EMPLOYERS, "Manage Employers"),
    ],
}


def ensure_page_key(store: MutableMapping):
    if "page" not in store:
        store["page"] = HOME


def sidebar_links(context: Optional[SessionContext]) -> List[Tuple[str, str]]:
    """(page_key, label) pairs visible to this user; Login only when signed out."""
    links = list(PUBLIC_LINKS)
    if context is None:
        return links + [(LOGIN, "Log in")]
    return links + ROLE_LINKS.get(context.role, [])


def render_sidebar_list(store: MutableMapping, context: Optional[SessionContext]) -> bool:
    """
    Render vertical navigation buttons in the sidebar.
    Returns True when "Log out" was clicked; the caller owns the logout call.
    """
    ensure_page_key(store)
    st.sidebar.title(settings.APP_TITLE)
    st.sidebar.write("")  # spacer
    for key, label in sidebar_links(context):
        if st.sidebar.button(
            label,
            key=f"nav_{key}",
            type="primary" if store.get("page") == key else "secondary",
        ):
            navigate(store, key)
            safe_rerun()

    st.sidebar.markdown("---")
    if context is None:
        st.sidebar.write("You are not signed in.")
        return False
    st.sidebar.caption(f"Signed in as {context.user.email or context.user.display_name}")
    return st.sidebar.button("Log out", key="nav_logout")
