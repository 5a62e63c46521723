# src/ui/pages/courses.py
"""
Public course catalog. Filtering is server-side: every filter change sends
search/category/level to GET /courses and the grid shows exactly what comes
back.
"""

from typing import Any, Dict, List

from src.api.ui_integration import course_api
from src.schemas.entities import Course, item_id
from src.ui import components
from src.ui.context import st, safe_rerun, navigate, COURSE_DETAIL, HOME, LOGIN, MY_COURSES
from src.ui.filters import FilterController
from src.ui.list_view import ListView
from src.ui.pages.base import PageController

CATEGORIES = [
    "Programming",
    "Web Development",
    "Data Science",
    "Design",
    "Business",
    "Marketing",
]
LEVELS = ["beginner", "intermediate", "advanced"]
LEVEL_COLORS = {"beginner": "#bbf7d0", "intermediate": "#fde68a", "advanced": "#e5e7eb"}


class CoursesPage(PageController):
    key = "courses"
    public = True

    def __init__(self, store, client):
        super().__init__(store, client)
        self.filters = FilterController(store, f"{self.key}.filters")
        self.list = ListView(store, f"{self.key}.list", self._fetch)

    def _fetch(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        return course_api.list_courses(self.client, **params)

    def params(self) -> Dict[str, str]:
        return self.filters.query_params()

    def load(self) -> bool:
        return self.list.ensure_loaded(self.params())

    def set_filter(self, name: str, value: str) -> bool:
        return self.filters.set(name, value or "")

    @property
    def courses(self) -> List[Dict[str, Any]]:
        return self.list.items

    @property
    def back_target(self) -> str:
        if self.context is not None and self.context.role == "student":
            return MY_COURSES
        return HOME

    def empty_message(self) -> str:
        if self.params():
            return "No courses found matching your criteria"
        return "No courses available yet"


def render_courses(store, client):
    page = CoursesPage(store, client)
    page.mount()

    top_l, top_r = st.columns([4, 1])
    with top_l:
        if st.button("← Back", key="courses_back"):
            navigate(store, page.back_target)
            safe_rerun()
    with top_r:
        if page.context is None and st.button("Login", key="courses_login"):
            navigate(store, LOGIN)
            safe_rerun()

    st.title("Course Catalog")
    state = page.filters.state

    with st.form("course_search"):
        c_search, c_btn = st.columns([4, 1])
        search = c_search.text_input(
            "Search", value=state.search, placeholder="Search courses...", label_visibility="collapsed"
        )
        if c_btn.form_submit_button("Search"):
            if page.set_filter("search", search.strip()):
                safe_rerun()

    c_cat, c_lvl = st.columns(2)
    category = c_cat.selectbox(
        "Category",
        [""] + CATEGORIES,
        index=([""] + CATEGORIES).index(state.category) if state.category in CATEGORIES else 0,
        format_func=lambda v: v or "All Categories",
    )
    level = c_lvl.selectbox(
        "Level",
        [""] + LEVELS,
        index=([""] + LEVELS).index(state.level) if state.level in LEVELS else 0,
        format_func=lambda v: v.title() if v else "All Levels",
    )
    changed = page.set_filter("category", category)
    changed = page.set_filter("level", level) or changed
    if changed:
        safe_rerun()

    with st.spinner("Loading courses..."):
        page.load()

    if not components.render_list_status(page.list, page.empty_message()):
        return

    grid = st.columns(3)
    for idx, course in enumerate(page.courses):
        model = Course.model_validate(course)
        with grid[idx % 3]:
            with st.container(border=True):
                st.markdown(
                    components.badge(model.category or "General")
                    + components.badge(model.level or "", LEVEL_COLORS.get(model.level, "#e5e7eb")),
                    unsafe_allow_html=True,
                )
                st.subheader(model.title)
                st.write(model.description[:160])
                if model.duration_text:
                    st.caption(f"⏱ {model.duration_text}")
                skills = [s.name for s in model.skillsCovered if s.name]
                if skills:
                    extra = f" +{len(skills) - 3}" if len(skills) > 3 else ""
                    st.caption(" · ".join(skills[:3]) + extra)
                if st.button("View Course", key=f"course_{item_id(course)}"):
                    navigate(store, COURSE_DETAIL, id=item_id(course))
                    safe_rerun()
