# src/ui/pages/admin_employers.py
"""
Company verification. The employer list is fetched once; the
all / verified / unverified tabs only filter what is already loaded.
"""

from typing import Any, Dict, List

from src.api.ui_integration import admin_api
from src.schemas.entities import Employer, item_id
from src.ui import components
from src.ui.context import st, safe_rerun, navigate
from src.ui.actions import Action, ActionDispatcher
from src.ui.filters import FilterController
from src.ui.list_view import ListView
from src.ui.pages.base import PageController

EMPLOYER_TABS = ["all", "verified", "unverified"]


class AdminEmployersPage(PageController):
    key = "admin_employers"
    required_role = "admin"

    def __init__(self, store, client):
        super().__init__(store, client)
        self.filters = FilterController(store, f"{self.key}.filters")
        self.list = ListView(store, f"{self.key}.list", self._fetch)
        self.actions = ActionDispatcher(
            store, f"{self.key}.actions", on_success=self.list.reload
        )
        self.verify = Action(
            name="verify",
            call=lambda uid, _reason: admin_api.verify_employer(self.client, uid),
            success_message="Company verified successfully!",
            failure_prefix="Failed to verify company",
            confirm_text="Are you sure you want to verify this company?",
        )
        self.unverify = Action(
            name="unverify",
            call=lambda uid, _reason: admin_api.unverify_employer(self.client, uid),
            success_message="Verification removed successfully!",
            failure_prefix="Failed to remove verification",
            confirm_text="Are you sure you want to remove verification from this company?",
        )

    def _fetch(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        return admin_api.list_employers(self.client)

    def load(self) -> bool:
        return self.list.ensure_loaded({})

    @property
    def active_filter(self) -> str:
        return self.filters.state.filter

    def select_filter(self, value: str) -> bool:
        return self.filters.set("filter", value)

    def counts(self) -> Dict[str, int]:
        verified = sum(1 for e in self.list.items if Employer.model_validate(e).is_verified)
        total = len(self.list.items)
        return {"all": total, "verified": verified, "unverified": total - verified}

    @property
    def employers(self) -> List[Dict[str, Any]]:
        f = self.active_filter
        if f == "all":
            return self.list.items
        want = f == "verified"
        return [e for e in self.list.items if Employer.model_validate(e).is_verified == want]

    def empty_message(self) -> str:
        f = self.active_filter
        if f == "all":
            return "No companies registered yet"
        return f"No {f} companies"

    def action_for(self, employer: Dict[str, Any]) -> Action:
        return self.unverify if Employer.model_validate(employer).is_verified else self.verify


def render_admin_employers(store, client):
    page = AdminEmployersPage(store, client)
    if not page.mount():
        navigate(store, page.redirect_to)
        safe_rerun()
        return

    st.title("Employer Verification")
    st.caption("Manage and verify company profiles")
    with st.spinner("Loading employers..."):
        page.load()

    counts = page.counts()
    cols = st.columns(len(EMPLOYER_TABS))
    for col, value in zip(cols, EMPLOYER_TABS):
        with col:
            if st.button(
                f"{value.title()} ({counts[value]})",
                key=f"emp_tab_{value}",
                type="primary" if page.active_filter == value else "secondary",
            ):
                if page.select_filter(value):
                    safe_rerun()

    components.render_action_feedback(page.actions)
    if page.list.state.error:
        st.error(page.list.state.error)
    if not page.employers:
        if page.list.state.loaded:
            st.info(page.empty_message())
        return

    for employer in page.employers:
        uid = item_id(employer)
        model = Employer.model_validate(employer)
        profile = model.employerProfile
        action = page.action_for(employer)
        with st.container(border=True):
            c_info, c_status, c_btn = st.columns([3, 1, 1])
            with c_info:
                st.markdown(f"**{profile.get('companyName') or 'N/A'}**")
                st.caption(f"{model.email or ''} · {profile.get('industry') or 'N/A'}")
            with c_status:
                if model.is_verified:
                    st.markdown(components.badge("Verified", "#bbf7d0"), unsafe_allow_html=True)
                else:
                    st.markdown(components.badge("Unverified", "#fde68a"), unsafe_allow_html=True)
            with c_btn:
                label = "Remove Verification" if model.is_verified else "Verify"
                if components.confirm_button(
                    components.busy_label(page.actions, uid, label),
                    key=f"{action.name}_{uid}",
                    confirm_text=action.confirm_text,
                    disabled=page.actions.is_busy(uid),
                ):
                    page.actions.dispatch(uid, action, confirmed=True)
                    safe_rerun()
