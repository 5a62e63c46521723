# src/ui/pages/admin_jobs.py
"""
Admin job moderation.
- Status tabs (all / pending / active / closed) filter server-side
- Pending jobs get Approve / Reject, every job gets View / Delete
- Every successful action re-fetches the list
"""

from typing import Any, Dict, List

from src.api.ui_integration import admin_api
from src.schemas.entities import Job, item_id
from src.ui import components
from src.ui.context import st, safe_rerun, navigate, JOB_DETAIL
from src.ui.actions import Action, ActionDispatcher
from src.ui.filters import FilterController
from src.ui.list_view import ListView
from src.ui.pages.base import PageController

JOB_TABS = [
    ("all", "All Jobs"),
    ("pending", "Pending Approval"),
    ("active", "Active"),
    ("closed", "Closed"),
]

STATUS_COLORS = {
    "active": "#bbf7d0",
    "pending": "#fde68a",
    "closed": "#e5e7eb",
}


class AdminJobsPage(PageController):
    key = "admin_jobs"
    required_role = "admin"

    def __init__(self, store, client):
        super().__init__(store, client)
        self.filters = FilterController(store, f"{self.key}.filters")
        self.list = ListView(store, f"{self.key}.list", self._fetch)
        self.actions = ActionDispatcher(
            store, f"{self.key}.actions", on_success=self.list.reload
        )
        self.approve = Action(
            name="approve",
            call=lambda job_id, _reason: admin_api.approve_job(self.client, job_id),
            success_message="Job approved successfully!",
            failure_prefix="Failed to approve job",
            confirm_text="Are you sure you want to approve this job?",
        )
        self.reject = Action(
            name="reject",
            call=lambda job_id, reason: admin_api.reject_job(self.client, job_id, reason),
            success_message="Job rejected successfully!",
            failure_prefix="Failed to reject job",
            requires_reason=True,
        )
        self.delete = Action(
            name="delete",
            call=lambda job_id, _reason: admin_api.delete_job(self.client, job_id),
            success_message="Job deleted successfully!",
            failure_prefix="Failed to delete job",
            confirm_text="Are you sure you want to delete this job permanently?",
        )

    @property
    def active_filter(self) -> str:
        return self.filters.state.filter

    def params(self) -> Dict[str, Any]:
        f = self.active_filter
        return {"status": f} if f != "all" else {}

    def _fetch(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        return admin_api.list_jobs(self.client, status=params.get("status"))

    def load(self) -> bool:
        return self.list.ensure_loaded(self.params())

    def select_filter(self, value: str) -> bool:
        return self.filters.set("filter", value)

    @property
    def jobs(self) -> List[Dict[str, Any]]:
        return self.list.items

    def count_label(self) -> str:
        return f"All Jobs ({len(self.jobs)})"

    def empty_message(self) -> str:
        f = self.active_filter
        if f == "pending":
            return "There are no pending jobs to review."
        return f"No {f} jobs available."

    @staticmethod
    def controls_for(job: Dict[str, Any]) -> List[str]:
        if Job.model_validate(job).is_pending:
            return ["approve", "reject", "view", "delete"]
        return ["view", "delete"]


def render_admin_jobs(store, client):
    page = AdminJobsPage(store, client)
    if not page.mount():
        navigate(store, page.redirect_to)
        safe_rerun()
        return

    st.title("Job Management")
    with st.spinner("Loading jobs..."):
        page.load()

    # Filter tabs
    cols = st.columns(len(JOB_TABS))
    for col, (value, label) in zip(cols, JOB_TABS):
        with col:
            if value == "all":
                label = page.count_label()
            if st.button(
                label,
                key=f"jobs_tab_{value}",
                type="primary" if page.active_filter == value else "secondary",
            ):
                if page.select_filter(value):
                    safe_rerun()

    components.render_action_feedback(page.actions)
    if not components.render_list_status(page.list, page.empty_message()):
        return

    for job in page.jobs:
        jid = item_id(job)
        model = Job.model_validate(job)
        busy = page.actions.is_busy(jid)
        with st.container(border=True):
            employer = (job.get("employer") or {}).get("email") or "Unknown Employer"
            status = model.status or "unknown"
            st.markdown(
                f"### {model.title}  "
                + components.badge(status, STATUS_COLORS.get(status, "#fecaca")),
                unsafe_allow_html=True,
            )
            st.caption(employer)
            st.write(model.description[:300])
            if model.location_text:
                st.caption(f"📍 {model.location_text}")
            skills = [s.name for s in model.requiredSkills if s.name]
            if skills:
                extra = f" +{len(skills) - 5} more" if len(skills) > 5 else ""
                st.caption(" · ".join(skills[:5]) + extra)

            controls = page.controls_for(job)
            bcols = st.columns(len(controls))
            for bcol, control in zip(bcols, controls):
                with bcol:
                    if control == "approve":
                        if components.confirm_button(
                            components.busy_label(page.actions, jid, "✓ Approve"),
                            key=f"approve_{jid}",
                            confirm_text=page.approve.confirm_text,
                            disabled=busy,
                        ):
                            page.actions.dispatch(jid, page.approve, confirmed=True)
                            safe_rerun()
                    elif control == "reject":
                        reason = components.reason_prompt(
                            components.busy_label(page.actions, jid, "✗ Reject"),
                            key=f"reject_{jid}",
                            prompt="Please provide a reason for rejection:",
                            disabled=busy,
                        )
                        if reason is not None:
                            result = page.actions.dispatch(jid, page.reject, reason=reason)
                            if result.skipped:
                                st.warning("A reason is required to reject a job.")
                            else:
                                safe_rerun()
                    elif control == "view":
                        if st.button("View Details", key=f"view_{jid}"):
                            navigate(store, JOB_DETAIL, id=jid)
                            safe_rerun()
                    elif control == "delete":
                        if components.confirm_button(
                            components.busy_label(page.actions, jid, "Delete", "Deleting..."),
                            key=f"delete_{jid}",
                            confirm_text=page.delete.confirm_text,
                            disabled=busy,
                        ):
                            page.actions.dispatch(jid, page.delete, confirmed=True)
                            safe_rerun()
