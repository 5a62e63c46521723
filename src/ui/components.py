# src/ui/components.py
"""
Shared Streamlit widgets: list status, pagination, confirm/reason prompts,
action feedback, the top-right user block and logout.
"""

import logging
from typing import Optional

from src.api.ui_integration import auth_api
from src.api.ui_integration.client import ApiClient, RequestError
from src.ui.actions import ActionDispatcher
from src.ui.context import st, safe_rerun, navigate, HOME
from src.ui.filters import FilterController
from src.ui.list_view import ListView
from src.ui.session import SessionContext, clear_page_state, clear_session

logger = logging.getLogger(__name__)


# ---------------------------
# Styling helpers
# ---------------------------
def card_html(title: str, value: str, active: bool = False) -> str:
    bg = "#617cff" if active else "#bfc8ff"
    text = "#fff" if active else "#111"
    return f"""
    <div style="
        width:100%;
        height:140px;
        border-radius:16px;
        background:{bg};
        color:{text};
        text-align:center;
        box-shadow:0 6px 18px rgba(0,0,0,0.12);
        display:flex;
        flex-direction:column;
        justify-content:center;
    ">
        <div style="font-size:15px;opacity:0.95;">{title}</div>
        <div style="font-size:36px;font-weight:700;margin-top:8px;">{value}</div>
    </div>
    """


def badge(text: str, color: str = "#e5e7eb") -> str:
    return (
        f"<span style='background:{color};padding:2px 8px;border-radius:8px;"
        f"font-size:12px;margin-right:4px'>{text}</span>"
    )


# ---------------------------
# List status
# ---------------------------
def render_list_status(view: ListView, empty_message: str) -> bool:
    """
    Render the error banner / empty state for a list.
    Returns True when there are rows to render.
    """
    state = view.state
    if state.error:
        st.error(state.error)
        if st.button("Retry", key=f"{view.key}_retry"):
            view.reload()
            safe_rerun()
    if state.loading:
        st.info("Loading...")
        return False
    if view.is_empty:
        st.info(empty_message)
        return False
    return bool(state.items)


def render_pagination(filters: FilterController, key: str):
    """Prev/Next by one page. Next is never disabled (no total count available)."""
    cprev, cinfo, cnext = st.columns([1, 2, 1])
    with cprev:
        if st.button("⬅️ Previous", key=f"{key}_prev", disabled=not filters.can_go_prev):
            filters.prev_page()
            safe_rerun()
    with cinfo:
        st.markdown(
            f"<p style='text-align:center;'>Page {filters.state.page}</p>",
            unsafe_allow_html=True,
        )
    with cnext:
        if st.button("Next ➡️", key=f"{key}_next", disabled=not filters.can_go_next):
            filters.next_page()
            safe_rerun()


# ---------------------------
# Action prompts
# ---------------------------
def confirm_button(
    label: str, key: str, confirm_text: Optional[str] = None, disabled: bool = False
) -> bool:
    """
    Two-step button: the first click asks for confirmation, the second
    (on "Confirm") returns True. Without confirm_text it is a plain button.
    """
    pending_key = f"confirm_{key}"
    if confirm_text and st.session_state.get(pending_key):
        st.warning(confirm_text)
        c_yes, c_no = st.columns(2)
        if c_yes.button("Confirm", key=f"{key}_yes"):
            st.session_state.pop(pending_key, None)
            return True
        if c_no.button("Cancel", key=f"{key}_no"):
            st.session_state.pop(pending_key, None)
            safe_rerun()
        return False

    if st.button(label, key=key, disabled=disabled):
        if not confirm_text:
            return True
        st.session_state[pending_key] = True
        safe_rerun()
    return False


def reason_prompt(label: str, key: str, prompt: str, disabled: bool = False) -> Optional[str]:
    """Returns the submitted reason (possibly empty) or None when nothing was submitted."""
    with st.popover(label, disabled=disabled):
        with st.form(f"{key}_form", clear_on_submit=True):
            reason = st.text_area(prompt, key=f"{key}_reason")
            if st.form_submit_button("Submit"):
                return reason
    return None


def render_action_feedback(dispatcher: ActionDispatcher):
    """Show (once) the outcome of the last action, then clear it."""
    state = dispatcher.state
    if state.last_message:
        st.success(state.last_message)
        state.last_message = None
    if state.last_error:
        st.error(state.last_error)
        state.last_error = None


def busy_label(dispatcher: ActionDispatcher, item_id: str, label: str, busy: str = "Processing...") -> str:
    return busy if dispatcher.is_busy(item_id) else label


# ---------------------------
# Top-right user block + logout
# ---------------------------
def render_top_right_user_block(context: Optional[SessionContext]):
    """Welcome / name / role, right-aligned. Nothing when signed out."""
    if context is None:
        return
    user = context.user
    html = "<div style='text-align:right;padding-right:8px;'>"
    html += "<div style='font-size:14px;opacity:0.9;'>Welcome</div>"
    html += f"<div style='font-weight:600;font-size:16px'>{user.display_name}</div>"
    html += f"<div style='opacity:0.75;font-size:13px'>{user.role.title()}</div>"
    html += "</div>"
    st.markdown(html, unsafe_allow_html=True)


def logout_and_clear(store, client: ApiClient):
    """
    Tell the backend (best effort), then always drop the session and go home.
    """
    try:
        auth_api.logout(client)
    except RequestError as e:
        logger.info("Backend logout failed, clearing local session anyway: %s", e.message)
    clear_session(store)
    clear_page_state(store)
    navigate(store, HOME)
    safe_rerun()
