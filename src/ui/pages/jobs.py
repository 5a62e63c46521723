# src/ui/pages/jobs.py
"""
Public job board. GET /jobs once, then filter in memory
(title search, job type, experience level, location substring).
"""

from typing import Any, Dict, List

from src.api.ui_integration import job_api
from src.schemas.entities import Job, item_id
from src.ui import components
from src.ui.context import st, safe_rerun, navigate, JOB_DETAIL
from src.ui.filters import FilterController
from src.ui.list_view import ListView
from src.ui.pages.base import PageController

JOB_TYPES = ["full-time", "part-time", "contract", "internship", "freelance"]
EXPERIENCE_LEVELS = ["entry", "mid", "senior", "lead", "executive"]


class JobsPage(PageController):
    key = "jobs"
    public = True

    def __init__(self, store, client):
        super().__init__(store, client)
        # category holds the job type, level the experience level
        self.filters = FilterController(store, f"{self.key}.filters")
        self.list = ListView(store, f"{self.key}.list", self._fetch)

    def _fetch(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        return job_api.list_jobs(self.client)

    def load(self) -> bool:
        return self.list.ensure_loaded({})

    def set_filter(self, name: str, value: str) -> bool:
        return self.filters.set(name, value or "")

    @property
    def jobs(self) -> List[Dict[str, Any]]:
        s = self.filters.state
        out = []
        for job in self.list.items:
            model = Job.model_validate(job)
            if s.search and s.search.lower() not in model.title.lower():
                continue
            if s.category and model.jobType != s.category:
                continue
            if s.level and model.experienceLevel != s.level:
                continue
            if s.location:
                where = f"{model.location.get('city') or ''} {model.location.get('state') or ''}"
                if s.location.lower() not in where.lower():
                    continue
            out.append(job)
        return out

    def count_label(self) -> str:
        n = len(self.jobs)
        return f"{n} job{'' if n == 1 else 's'} found"


def _options(values: List[str], current: str) -> int:
    choices = [""] + values
    return choices.index(current) if current in choices else 0


def render_jobs(store, client):
    page = JobsPage(store, client)
    page.mount()

    st.title("Browse Jobs")
    st.caption("Discover opportunities that match your skills and interests")

    state = page.filters.state
    c1, c2, c3, c4 = st.columns(4)
    search = c1.text_input("Search Jobs", value=state.search, placeholder="Job title...")
    job_type = c2.selectbox(
        "Job Type",
        [""] + JOB_TYPES,
        index=_options(JOB_TYPES, state.category),
        format_func=lambda v: v.title() if v else "All Types",
    )
    level = c3.selectbox(
        "Experience Level",
        [""] + EXPERIENCE_LEVELS,
        index=_options(EXPERIENCE_LEVELS, state.level),
        format_func=lambda v: v.title() if v else "All Levels",
    )
    location = c4.text_input("Location", value=state.location, placeholder="City or state...")
    page.set_filter("search", search.strip())
    page.set_filter("category", job_type)
    page.set_filter("level", level)
    page.set_filter("location", location.strip())

    with st.spinner("Loading jobs..."):
        page.load()

    st.markdown(f"**{page.count_label()}**")
    if page.list.state.error:
        st.error(page.list.state.error)
    if not page.jobs:
        if page.list.state.loaded:
            st.info("No jobs found. Try adjusting your filters")
        return

    for job in page.jobs:
        jid = item_id(job)
        model = Job.model_validate(job)
        with st.container(border=True):
            st.markdown(f"### {model.title}")
            company = ((job.get("employer") or {}).get("employerProfile") or {}).get("companyName")
            if company:
                st.caption(company)
            st.markdown(
                components.badge(model.jobType or "")
                + components.badge(model.experienceLevel or ""),
                unsafe_allow_html=True,
            )
            st.write(model.description[:200])
            if model.location_text:
                st.caption(f"📍 {model.location_text}")
            if st.button("View Details", key=f"job_{jid}"):
                navigate(store, JOB_DETAIL, id=jid)
                safe_rerun()
