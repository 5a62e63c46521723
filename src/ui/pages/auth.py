# src/ui/pages/auth.py
"""
Login page.

On successful login:
  - stores token + user record via store_session()
  - routes by role (admin -> Admin Dashboard, student -> My Courses,
    employer -> Jobs)
  - triggers safe_rerun() so the sidebar / top-right block update immediately
"""

import logging
from typing import Optional

from src.api.ui_integration import auth_api
from src.api.ui_integration.client import RequestError
from src.ui.context import st, safe_rerun, navigate, HOME, ROLE_HOME
from src.ui.pages.base import PageController
from src.ui.session import store_session
from src.utils.validators import validate_email_str, validate_password

logger = logging.getLogger(__name__)


class LoginPage(PageController):
    key = "login"
    public = True

    def __init__(self, store, client):
        super().__init__(store, client)
        self.error: Optional[str] = None

    def submit(self, email: str, password: str) -> bool:
        """Returns True when signed in; the target page is in redirect_to."""
        email = (email or "").strip()
        if not email or not validate_password(password):
            self.error = "Please provide both email and password."
            return False
        if not validate_email_str(email):
            self.error = "Please enter a valid email address."
            return False
        try:
            token, user = auth_api.login(self.client, email, password)
        except RequestError as e:
            self.error = f"Sign in failed: {e.message}"
            return False

        store_session(self.store, token, user)
        role = (user.get("role") or "").lower()
        self.redirect_to = ROLE_HOME.get(role, HOME)
        logger.info("Signed in as %s (%s)", email, role or "unknown role")
        return True


def login_page(store, client):
    page = LoginPage(store, client)
    page.mount()
    if page.context is not None:
        st.info(f"You are already signed in as {page.context.user.display_name}.")

    st.title("Sign In")
    with st.form("login_form"):
        email = st.text_input("Email", value=store.get("last_email", ""))
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign In")

    if submitted:
        # Preserve last typed email for the next attempt
        if email:
            store["last_email"] = email
        if page.submit(email, password):
            st.success("Login successful")
            navigate(store, page.redirect_to)
            safe_rerun()
        else:
            st.error(page.error)
