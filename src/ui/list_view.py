# src/ui/list_view.py
"""
List view state for one collection on one page.

State lives in the session store under a page-specific key so it survives
Streamlit reruns. Fetches are tagged with a monotonically increasing
sequence number; a response that arrives for a superseded request is
dropped instead of overwriting fresher data.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, MutableMapping, Optional

from src.api.ui_integration.client import GENERIC_ERROR, RequestError

logger = logging.getLogger(__name__)


@dataclass
class ListState:
    items: List[Dict[str, Any]] = field(default_factory=list)
    loading: bool = False
    error: Optional[str] = None
    params: Optional[Dict[str, Any]] = None
    loaded: bool = False
    stale: bool = False
    seq: int = 0


class ListView:
    def __init__(
        self,
        store: MutableMapping,
        key: str,
        fetch: Callable[[Dict[str, Any]], List[Dict[str, Any]]],
    ):
        self.store = store
        self.key = key
        self.fetch = fetch

    @property
    def state(self) -> ListState:
        if not isinstance(self.store.get(self.key), ListState):
            self.store[self.key] = ListState()
        return self.store[self.key]

    @property
    def items(self) -> List[Dict[str, Any]]:
        return self.state.items

    @property
    def is_empty(self) -> bool:
        s = self.state
        return s.loaded and not s.loading and not s.error and not s.items

    # --- request sequencing ---
    def begin(self, params: Dict[str, Any]) -> int:
        s = self.state
        s.seq += 1
        s.params = dict(params)
        s.loading = True
        s.stale = False
        return s.seq

    def resolve(self, token: int, items: Optional[List[Dict[str, Any]]]) -> bool:
        s = self.state
        if token != s.seq:
            logger.debug("%s: dropping superseded response #%s (latest #%s)", self.key, token, s.seq)
            return False
        s.items = list(items or [])
        s.error = None
        s.loading = False
        s.loaded = True
        return True

    def fail(self, token: int, message: str) -> bool:
        s = self.state
        if token != s.seq:
            logger.debug("%s: dropping superseded failure #%s (latest #%s)", self.key, token, s.seq)
            return False
        # previous items stay on screen
        s.error = message or GENERIC_ERROR
        s.loading = False
        s.loaded = True
        return True

    # --- loading ---
    def load(self, params: Dict[str, Any]):
        token = self.begin(params)
        try:
            items = self.fetch(dict(params))
        except RequestError as e:
            logger.warning("%s: load failed: %s", self.key, e.message)
            self.fail(token, e.message)
            return
        self.resolve(token, items)

    def ensure_loaded(self, params: Dict[str, Any]) -> bool:
        """Fetch on first mount, on a params change, after invalidate() or after a
        failed load; otherwise no-op."""
        s = self.state
        if s.loaded and not s.stale and not s.error and s.params == dict(params):
            return False
        self.load(params)
        return True

    def reload(self):
        self.load(self.state.params or {})

    def invalidate(self):
        self.state.stale = True


def invalidate_all(store: MutableMapping):
    """Mark every list in the store stale so the next mount refetches."""
    for value in list(store.values()):
        if isinstance(value, ListState):
            value.stale = True
