# src/ui/actions.py
"""
Per-item mutating actions (approve / reject / delete / hide / verify).

dispatch() never touches the list itself: on success it calls on_success()
exactly once (normally ListView.reload) so the page always shows the
server's view after a mutation.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, MutableMapping, Optional

from src.api.ui_integration.client import GENERIC_ERROR, RequestError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Action:
    name: str
    call: Callable[[str, Optional[str]], object]
    success_message: str
    failure_prefix: str
    confirm_text: Optional[str] = None
    requires_reason: bool = False


@dataclass
class ActionResult:
    ok: bool = False
    skipped: bool = False
    message: Optional[str] = None


@dataclass
class ActionState:
    busy: Dict[str, bool] = field(default_factory=dict)
    last_error: Optional[str] = None
    last_message: Optional[str] = None


class ActionDispatcher:
    def __init__(self, store: MutableMapping, key: str, on_success: Callable[[], None]):
        self.store = store
        self.key = key
        self.on_success = on_success

    @property
    def state(self) -> ActionState:
        if not isinstance(self.store.get(self.key), ActionState):
            self.store[self.key] = ActionState()
        return self.store[self.key]

    def is_busy(self, item_id: str) -> bool:
        return bool(self.state.busy.get(item_id))

    def dispatch(
        self,
        item_id: str,
        action: Action,
        *,
        confirmed: bool = False,
        reason: Optional[str] = None,
    ) -> ActionResult:
        if action.confirm_text and not confirmed:
            return ActionResult(skipped=True)
        if action.requires_reason:
            reason = (reason or "").strip()
            if not reason:
                return ActionResult(skipped=True)
        if self.is_busy(item_id):
            return ActionResult(skipped=True)

        s = self.state
        s.busy[item_id] = True
        s.last_error = None
        s.last_message = None
        try:
            action.call(item_id, reason)
        except RequestError as e:
            logger.warning("%s %s failed: %s", action.name, item_id, e.message)
            s.last_error = f"{action.failure_prefix}: {e.message or GENERIC_ERROR}"
            return ActionResult(ok=False, message=s.last_error)
        finally:
            s.busy[item_id] = False

        logger.info("%s %s succeeded", action.name, item_id)
        s.last_message = action.success_message
        self.on_success()
        return ActionResult(ok=True, message=action.success_message)
