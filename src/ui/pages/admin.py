"""
Admin dashboard page for Streamlit app.
Features:
- Equal-sized counter cards from GET /admin/dashboard
- Quick links to the moderation pages
"""

import logging
from typing import Any, Dict, List, Tuple

from src.api.ui_integration import admin_api
from src.api.ui_integration.client import RequestError
from src.ui.context import st, safe_rerun, navigate, ADMIN_JOBS, ADMIN_POSTS, ADMIN_EMPLOYERS
from src.ui import components
from src.ui.pages.base import PageController

logger = logging.getLogger(__name__)

OVERVIEW_CARDS: List[Tuple[str, str]] = [
    ("totalUsers", "Total Users"),
    ("totalJobs", "Total Jobs"),
    ("totalCourses", "Total Courses"),
    ("pendingJobs", "Pending Jobs"),
]


class AdminDashboardPage(PageController):
    key = "admin_dashboard"
    required_role = "admin"

    def __init__(self, store, client):
        super().__init__(store, client)
        self.stats: Dict[str, Any] = {}
        self.error = None

    def load(self) -> bool:
        try:
            self.stats = admin_api.get_dashboard(self.client)
        except RequestError as e:
            logger.warning("Dashboard load failed: %s", e.message)
            self.error = e.message
            return False
        return True

    def counter(self, name: str) -> int:
        overview = self.stats.get("overview") or {}
        try:
            return int(overview.get(name) or 0)
        except (TypeError, ValueError):
            return 0

    def cards(self) -> List[Tuple[str, int]]:
        return [(label, self.counter(name)) for name, label in OVERVIEW_CARDS]


# ----------------- Admin page rendering -----------------
def admin_dashboard(store, client):
    page = AdminDashboardPage(store, client)
    if not page.mount():
        navigate(store, page.redirect_to)
        safe_rerun()
        return

    st.title("Admin Dashboard")
    st.caption("Manage the platform and monitor activity")

    with st.spinner("Loading dashboard..."):
        page.load()
    if page.error:
        st.error(page.error)

    # Cards row
    st.markdown("<br>", unsafe_allow_html=True)
    cols = st.columns(len(OVERVIEW_CARDS))
    for col, (label, value) in zip(cols, page.cards()):
        with col:
            st.markdown(components.card_html(label, str(value)), unsafe_allow_html=True)

    st.write("---")
    st.subheader("Quick Actions")
    c1, c2, c3 = st.columns(3)
    if c1.button("Review Jobs", key="dash_jobs", use_container_width=True):
        navigate(store, ADMIN_JOBS)
        safe_rerun()
    if c2.button("Moderate Posts", key="dash_posts", use_container_width=True):
        navigate(store, ADMIN_POSTS)
        safe_rerun()
    if c3.button("Verify Employers", key="dash_employers", use_container_width=True):
        navigate(store, ADMIN_EMPLOYERS)
        safe_rerun()
