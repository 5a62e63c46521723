# src/ui/filters.py
"""
Filter / tab / pagination state for a list page.
Changing a field resets the fields that depend on it (e.g. switching tab
goes back to page 1). Callers re-run ListView.ensure_loaded() with the new
params; ensure_loaded decides whether a fetch is needed.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Iterable, Mapping, MutableMapping, Optional

# default dependent-field resets
DEFAULT_RESETS = {
    "filter": ("page",),
    "tab": ("page",),
    "search": ("page",),
    "category": ("page",),
    "level": ("page",),
    "location": ("page",),
}


@dataclass
class FilterState:
    filter: str = "all"
    tab: str = "all"
    page: int = 1
    search: str = ""
    category: str = ""
    level: str = ""
    location: str = ""


class FilterController:
    def __init__(
        self,
        store: MutableMapping,
        key: str,
        defaults: Optional[Dict[str, Any]] = None,
        resets: Optional[Mapping[str, Iterable[str]]] = None,
    ):
        self.store = store
        self.key = key
        self.defaults = FilterState(**(defaults or {}))
        self.resets = DEFAULT_RESETS if resets is None else resets

    @property
    def state(self) -> FilterState:
        if not isinstance(self.store.get(self.key), FilterState):
            self.store[self.key] = replace(self.defaults)
        return self.store[self.key]

    def set(self, name: str, value: Any) -> bool:
        s = self.state
        if getattr(s, name) == value:
            return False
        setattr(s, name, value)
        for dep in self.resets.get(name, ()):
            setattr(s, dep, getattr(self.defaults, dep))
        return True

    @property
    def can_go_prev(self) -> bool:
        return self.state.page > 1

    @property
    def can_go_next(self) -> bool:
        # No total count is consulted; see DESIGN.md (pagination open question).
        return True

    def prev_page(self) -> bool:
        if not self.can_go_prev:
            return False
        self.state.page -= 1
        return True

    def next_page(self) -> bool:
        self.state.page += 1
        return True

    def query_params(self) -> Dict[str, str]:
        s = self.state
        return {
            k: getattr(s, k) for k in ("search", "category", "level") if getattr(s, k)
        }

    def as_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self.state, f.name) for f in fields(FilterState)}
