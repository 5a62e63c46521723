# src/ui/pages/base.py
import logging
from typing import MutableMapping, Optional

from src.api.ui_integration.client import ApiClient
from src.ui.routes import LOGIN
from src.ui.session import AuthError, SessionContext, optional_session, require_session

logger = logging.getLogger(__name__)


class PageController:
    """
    Guard + state holder for one page.
    Subclasses set `required_role` (None = any signed-in user) or
    `public = True` (session optional). mount() must succeed before any
    data is fetched.
    """

    key = "page"
    required_role: Optional[str] = None
    forbidden_to = LOGIN
    public = False

    def __init__(self, store: MutableMapping, client: ApiClient):
        self.store = store
        self.client = client
        self.context: Optional[SessionContext] = None
        self.redirect_to: Optional[str] = None

    def mount(self) -> bool:
        if self.public:
            self.context = optional_session(self.store)
            return True
        try:
            self.context = require_session(
                self.store, self.required_role, forbidden_to=self.forbidden_to
            )
        except AuthError as e:
            logger.info("%s: redirecting to %s (%s)", self.key, e.redirect_to, e)
            self.redirect_to = e.redirect_to
            return False
        return True
