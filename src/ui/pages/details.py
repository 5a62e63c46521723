# src/ui/pages/details.py
"""
Read-only drill-downs for one job, course or post. The id arrives through
navigate(..., id=...) and is read back with nav_param.
"""

import logging
from typing import Any, Callable, Dict, Optional

from src.api.ui_integration import course_api, job_api, post_api
from src.api.ui_integration.client import RequestError
from src.schemas.entities import Course, Job, Post
from src.ui import components
from src.ui.context import st, safe_rerun, navigate, nav_param, ADMIN_POSTS, COURSES, JOBS, HOME
from src.ui.pages.base import PageController

logger = logging.getLogger(__name__)


class DetailPage(PageController):
    public = True
    not_found = "Not found"

    def __init__(self, store, client):
        super().__init__(store, client)
        self.item: Optional[Dict[str, Any]] = None
        self.error: Optional[str] = None

    @property
    def item_id(self) -> Optional[str]:
        return nav_param(self.store, "id")

    def fetch(self, item_id: str) -> Dict[str, Any]:
        raise NotImplementedError

    def load(self) -> bool:
        if not self.item_id:
            self.error = self.not_found
            return False
        try:
            self.item = self.fetch(self.item_id) or None
        except RequestError as e:
            logger.warning("%s %s load failed: %s", self.key, self.item_id, e.message)
            self.error = e.message
            return False
        if self.item is None:
            self.error = self.not_found
            return False
        return True


class JobDetailPage(DetailPage):
    key = "job_detail"
    not_found = "Job not found"
    back_to = JOBS

    def fetch(self, item_id: str) -> Dict[str, Any]:
        return job_api.get_job(self.client, item_id)


class CourseDetailPage(DetailPage):
    key = "course_detail"
    not_found = "Course not found"
    back_to = COURSES

    def fetch(self, item_id: str) -> Dict[str, Any]:
        return course_api.get_course(self.client, item_id)


class PostDetailPage(DetailPage):
    key = "post_detail"
    not_found = "Post not found"

    @property
    def back_to(self) -> str:
        if self.context is not None and self.context.role == "admin":
            return ADMIN_POSTS
        return HOME

    def fetch(self, item_id: str) -> Dict[str, Any]:
        return post_api.get_post(self.client, item_id)


def _bullets(title: str, values):
    values = [v for v in values or [] if v]
    if values:
        st.subheader(title)
        st.markdown("\n".join(f"- {v}" for v in values))


def _render_job(job: Dict[str, Any]):
    model = Job.model_validate(job)
    st.title(model.title)
    company = ((job.get("employer") or {}).get("employerProfile") or {}).get("companyName")
    st.caption(" · ".join(p for p in [company, model.location_text, model.status] if p))
    st.markdown(
        components.badge(model.jobType or "") + components.badge(model.experienceLevel or ""),
        unsafe_allow_html=True,
    )
    st.write(model.description or "No description provided.")
    _bullets("Responsibilities", job.get("responsibilities"))
    _bullets("Qualifications", job.get("qualifications"))
    _bullets("Required Skills", [s.name for s in model.requiredSkills])
    _bullets("Benefits", job.get("benefits"))


def _render_course(course: Dict[str, Any]):
    model = Course.model_validate(course)
    st.title(model.title)
    st.markdown(
        components.badge(model.category or "General") + components.badge(model.level or ""),
        unsafe_allow_html=True,
    )
    st.write(model.description)
    if model.duration_text:
        st.caption(f"⏱ {model.duration_text} · {model.total_lessons} lessons")
    _bullets("Skills Covered", [s.name for s in model.skillsCovered])
    if model.modules:
        st.subheader("Course Content")
        for idx, module in enumerate(model.modules, start=1):
            lessons = module.get("lessons") or []
            with st.expander(f"{idx}. {module.get('title') or 'Module'} ({len(lessons)} lessons)"):
                for lesson in lessons:
                    st.markdown(f"- {lesson.get('title') or ''}")
    _bullets("Prerequisites", course.get("prerequisites"))


def _render_post(post: Dict[str, Any]):
    model = Post.model_validate(post)
    st.title(model.author_name)
    meta = [model.visibility, (model.postType or "").replace("-", " ")]
    st.caption(" · ".join(m for m in meta if m))
    st.write(model.content)
    st.caption(f"👍 {len(model.likes)} · 💬 {len(model.comments)}")
    for comment in model.comments:
        if isinstance(comment, dict):
            st.markdown(f"> {comment.get('content') or ''}")


def _render_detail(store, client, page_cls: Callable, draw: Callable):
    page = page_cls(store, client)
    page.mount()
    if st.button("← Back", key=f"{page.key}_back"):
        navigate(store, page.back_to)
        safe_rerun()
    with st.spinner("Loading..."):
        page.load()
    if page.error:
        st.error(page.error)
        return
    draw(page.item)


def render_job_detail(store, client):
    _render_detail(store, client, JobDetailPage, _render_job)


def render_course_detail(store, client):
    _render_detail(store, client, CourseDetailPage, _render_course)


def render_post_detail(store, client):
    _render_detail(store, client, PostDetailPage, _render_post)
