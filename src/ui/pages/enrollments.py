# src/ui/pages/enrollments.py
"""
Student "My Courses" page.
Enrollments and the student profile are fetched in parallel; a profile
failure only costs the display name, an enrollments failure is shown.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional

from src.api.ui_integration import course_api, student_api
from src.api.ui_integration.client import RequestError
from src.schemas.entities import Enrollment, StudentProfile
from src.ui import components
from src.ui.context import st, safe_rerun, navigate, COURSES, COURSE_DETAIL, HOME
from src.ui.list_view import ListView
from src.ui.pages.base import PageController
from src.ui.session import clear_session

logger = logging.getLogger(__name__)


class StudentEnrollmentsPage(PageController):
    key = "enrollments"
    required_role = "student"
    forbidden_to = HOME

    def __init__(self, store, client):
        super().__init__(store, client)
        self.list = ListView(store, f"{self.key}.list", self._fetch)

    def _fetch(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        worker = self.client.detached()
        with ThreadPoolExecutor(max_workers=2) as ex:
            enrollments_f = ex.submit(course_api.list_my_enrollments, worker)
            profile_f = ex.submit(student_api.get_profile, worker)
            try:
                profile = profile_f.result()
            except RequestError as e:
                logger.info("Profile unavailable, falling back to email: %s", e.message)
                if e.status_code == 401:
                    clear_session(self.store)
                profile = None
            self.store[f"{self.key}.profile"] = profile
            try:
                return enrollments_f.result()
            except RequestError as e:
                if e.status_code == 401:
                    clear_session(self.store)
                raise

    def load(self) -> bool:
        return self.list.ensure_loaded({})

    @property
    def enrollments(self) -> List[Dict[str, Any]]:
        return self.list.items

    @property
    def profile(self) -> Optional[Dict[str, Any]]:
        return self.store.get(f"{self.key}.profile")

    @property
    def display_name(self) -> str:
        if isinstance(self.profile, dict):
            p = StudentProfile.model_validate(self.profile)
            if p.firstName and p.lastName:
                return f"{p.firstName} {p.lastName}"
        return self.context.user.email if self.context else ""

    def count_label(self) -> str:
        n = len(self.enrollments)
        return f"{n} course{'' if n == 1 else 's'} enrolled"

    @staticmethod
    def lessons_label(enrollment: Dict[str, Any]) -> str:
        e = Enrollment.model_validate(enrollment)
        return f"{len(e.completedLessons)} of {e.course.total_lessons} lessons completed"

    @staticmethod
    def has_certificate(enrollment: Dict[str, Any]) -> bool:
        e = Enrollment.model_validate(enrollment)
        return e.is_completed and bool(e.certificate)


def render_enrollments(store, client):
    page = StudentEnrollmentsPage(store, client)
    if not page.mount():
        navigate(store, page.redirect_to)
        safe_rerun()
        return

    with st.spinner("Loading your courses..."):
        page.load()

    st.title("My Courses")
    st.caption(page.display_name)

    bar_l, bar_r = st.columns([3, 1])
    bar_l.markdown(f"**{page.count_label()}**")
    if bar_r.button("Browse More Courses", key="enr_browse"):
        navigate(store, COURSES)
        safe_rerun()

    if not components.render_list_status(
        page.list, "Start learning by enrolling in your first course"
    ):
        return

    for idx, enrollment in enumerate(page.enrollments):
        model = Enrollment.model_validate(enrollment)
        course = model.course
        with st.container(border=True):
            head = f"### {course.title}"
            if model.is_completed:
                head += "  " + components.badge("Completed", "#bbf7d0")
            st.markdown(head, unsafe_allow_html=True)
            st.caption(f"{course.category or ''} · {course.level or ''}")
            st.write(course.description[:200])
            progress = max(0, min(100, int(model.progress or 0)))
            st.progress(progress / 100, text=f"{progress}%")
            st.caption(page.lessons_label(enrollment))

            c_go, c_cert = st.columns([3, 1])
            label = "Review" if model.is_completed else "Continue Learning"
            if c_go.button(label, key=f"learn_{model.id or idx}"):
                # lessons open from the course outline
                navigate(store, COURSE_DETAIL, id=course.id)
                safe_rerun()
            if page.has_certificate(enrollment):
                c_cert.markdown("🎓 Certificate issued")
