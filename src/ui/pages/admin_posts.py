# src/ui/pages/admin_posts.py
"""
Admin post moderation: the paginated feed ("all") and the reported queue.
Hide is a server-side toggle (hide/unhide); delete asks for confirmation.
"""

from typing import Any, Dict, List

from src.api.ui_integration import admin_api, post_api
from src.core.config import settings
from src.schemas.entities import Post, item_id
from src.ui import components
from src.ui.context import st, safe_rerun, navigate, ADMIN_DASHBOARD, POST_DETAIL
from src.ui.actions import Action, ActionDispatcher
from src.ui.filters import FilterController
from src.ui.list_view import ListView
from src.ui.pages.base import PageController


class AdminPostsPage(PageController):
    key = "admin_posts"
    required_role = "admin"

    def __init__(self, store, client, page_size: int = None):
        super().__init__(store, client)
        self.page_size = page_size or settings.POSTS_PAGE_SIZE
        self.filters = FilterController(store, f"{self.key}.filters")
        self.feed = ListView(store, f"{self.key}.feed", self._fetch_feed)
        self.reported = ListView(store, f"{self.key}.reported", self._fetch_reported)
        self.actions = ActionDispatcher(
            store, f"{self.key}.actions", on_success=self._refresh_active
        )
        self.hide = Action(
            name="hide",
            call=lambda post_id, _reason: admin_api.hide_post(self.client, post_id),
            success_message="Post visibility updated.",
            failure_prefix="Failed to hide post",
            confirm_text="Are you sure you want to change the visibility of this post?",
        )
        self.delete = Action(
            name="delete",
            call=lambda post_id, _reason: post_api.delete_post(self.client, post_id),
            success_message="Post deleted.",
            failure_prefix="Failed to delete post",
            confirm_text="Are you sure you want to delete this post? This action cannot be undone.",
        )

    def _fetch_feed(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        return post_api.list_feed(self.client, page=params["page"], limit=self.page_size)

    def _fetch_reported(self, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        return admin_api.list_reported_posts(self.client)

    @property
    def active_tab(self) -> str:
        return self.filters.state.tab

    @property
    def active_view(self) -> ListView:
        return self.reported if self.active_tab == "reported" else self.feed

    def params(self) -> Dict[str, Any]:
        if self.active_tab == "reported":
            return {}
        return {"page": self.filters.state.page}

    def load(self) -> bool:
        return self.active_view.ensure_loaded(self.params())

    def _refresh_active(self):
        # a moderated post can sit in both lists
        inactive = self.feed if self.active_view is self.reported else self.reported
        inactive.invalidate()
        self.active_view.reload()

    def select_tab(self, tab: str) -> bool:
        # switching tabs resets page to 1
        changed = self.filters.set("tab", tab)
        if changed:
            self.active_view.invalidate()
        return changed

    @property
    def posts(self) -> List[Dict[str, Any]]:
        return self.active_view.items

    @property
    def reported_count(self) -> int:
        return len(self.reported.items)

    @property
    def show_pagination(self) -> bool:
        view = self.feed
        return self.active_tab == "all" and not view.state.loading and bool(view.items)

    def empty_message(self) -> str:
        return "No reported posts" if self.active_tab == "reported" else "No posts found"

    @staticmethod
    def hide_label(post: Dict[str, Any]) -> str:
        return "Unhide" if post.get("isHidden") else "Hide"


def render_admin_posts(store, client):
    page = AdminPostsPage(store, client)
    if not page.mount():
        navigate(store, page.redirect_to)
        safe_rerun()
        return

    if st.button("← Back", key="posts_back"):
        navigate(store, ADMIN_DASHBOARD)
        safe_rerun()
    st.title("Post Moderation")

    with st.spinner("Loading posts..."):
        page.load()

    c_all, c_rep, _ = st.columns([1, 1, 3])
    with c_all:
        if st.button(
            "All Posts",
            key="posts_tab_all",
            type="primary" if page.active_tab == "all" else "secondary",
        ):
            if page.select_tab("all"):
                safe_rerun()
    with c_rep:
        label = "Reported Posts"
        if page.reported_count:
            label += f" ({page.reported_count})"
        if st.button(
            label,
            key="posts_tab_reported",
            type="primary" if page.active_tab == "reported" else "secondary",
        ):
            if page.select_tab("reported"):
                safe_rerun()

    components.render_action_feedback(page.actions)
    if components.render_list_status(page.active_view, page.empty_message()):
        for post in page.posts:
            _render_post(store, page, post)

    if page.show_pagination:
        components.render_pagination(page.filters, key="posts_page")


def _render_post(store, page: AdminPostsPage, post: Dict[str, Any]):
    pid = item_id(post)
    model = Post.model_validate(post)
    with st.container(border=True):
        head, actions = st.columns([3, 2])
        with head:
            badges = components.badge(model.visibility or "public")
            if model.isHidden:
                badges += components.badge("Hidden", "#fecaca")
            st.markdown(f"**{model.author_name}** {badges}", unsafe_allow_html=True)
            st.caption(f"{post.get('createdAt', '')} • {model.postType or 'general'}")
        with actions:
            c_view, c_hide, c_del = st.columns(3)
            if c_view.button("View", key=f"view_post_{pid}"):
                navigate(store, POST_DETAIL, id=pid)
                safe_rerun()
            with c_hide:
                if components.confirm_button(
                    page.hide_label(post),
                    key=f"hide_post_{pid}",
                    confirm_text=page.hide.confirm_text,
                    disabled=page.actions.is_busy(pid),
                ):
                    page.actions.dispatch(pid, page.hide, confirmed=True)
                    safe_rerun()
            with c_del:
                if components.confirm_button(
                    "Delete",
                    key=f"delete_post_{pid}",
                    confirm_text=page.delete.confirm_text,
                    disabled=page.actions.is_busy(pid),
                ):
                    page.actions.dispatch(pid, page.delete, confirmed=True)
                    safe_rerun()

        st.write(model.content)
        stats = f"👍 {len(model.likes)} · 💬 {len(model.comments)}"
        if model.isReported:
            stats += f" · 🚩 {len(model.reports)} reports"
        st.caption(stats)

        if page.active_tab == "reported" and model.reports:
            with st.expander("Reports"):
                for report in model.reports:
                    reporter = (report.get("user") or {}).get("email", "Anonymous")
                    st.markdown(
                        f"- **{report.get('reason', 'No reason')}** by {reporter} "
                        f"({report.get('reportedAt', '')})"
                    )
