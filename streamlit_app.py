# streamlit_app.py
"""
Main entry point for the Student Employability Platform UI.
Every page is a render function taking (store, client); the router below
dispatches on st.session_state["page"]. Query param ?page=... opens a page
directly (shared links).
"""

import logging

import streamlit as st

from src.core.config import configure_logging, settings
from src.ui import components
from src.ui.context import (
    safe_rerun,
    get_client,
    HOME,
    LOGIN,
    JOBS,
    JOB_DETAIL,
    COURSES,
    COURSE_DETAIL,
    POST_DETAIL,
    MY_COURSES,
    ADMIN_DASHBOARD,
    ADMIN_JOBS,
    ADMIN_POSTS,
    ADMIN_EMPLOYERS,
)
from src.ui.pages.admin import admin_dashboard
from src.ui.pages.admin_employers import render_admin_employers
from src.ui.pages.admin_jobs import render_admin_jobs
from src.ui.pages.admin_posts import render_admin_posts
from src.ui.pages.auth import login_page
from src.ui.pages.courses import render_courses
from src.ui.pages.details import render_course_detail, render_job_detail, render_post_detail
from src.ui.pages.enrollments import render_enrollments
from src.ui.pages.home import home_page
from src.ui.pages.jobs import render_jobs
from src.ui.session import optional_session
from src.ui.ui_helpers.navigation import ensure_page_key, render_sidebar_list

configure_logging()
logger = logging.getLogger(__name__)

ROUTES = {
    HOME: home_page,
    LOGIN: login_page,
    JOBS: render_jobs,
    JOB_DETAIL: render_job_detail,
    COURSES: render_courses,
    COURSE_DETAIL: render_course_detail,
    POST_DETAIL: render_post_detail,
    MY_COURSES: render_enrollments,
    ADMIN_DASHBOARD: admin_dashboard,
    ADMIN_JOBS: render_admin_jobs,
    ADMIN_POSTS: render_admin_posts,
    ADMIN_EMPLOYERS: render_admin_employers,
}

# App setup
st.set_page_config(layout="wide", page_title=settings.APP_TITLE)

store = st.session_state
client = get_client()

# ---------- Map URL query params into session state ----------
# e.g. http://localhost:8501/?page=Courses
page_param = st.query_params.get("page")
if page_param in ROUTES and not store.get("_page_param_applied"):
    store["page"] = page_param
    store["_page_param_applied"] = True

ensure_page_key(store)
context = optional_session(store)

# Sidebar Navigation
if render_sidebar_list(store, context):
    components.logout_and_clear(store, client)

# Layout: main content + top-right block
col_main, col_right = st.columns([4, 1])
with col_right:
    components.render_top_right_user_block(context)

with col_main:
    page = store.get("page")
    render = ROUTES.get(page)
    if render is None:
        logger.warning("Unknown page %r, falling back to Home", page)
        st.info("Unknown page. Please use the sidebar.")
        if st.button("Go Home", key="unknown_home"):
            store["page"] = HOME
            safe_rerun()
    else:
        render(store, client)
