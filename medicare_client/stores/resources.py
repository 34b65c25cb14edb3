"""Generic resource store: a client-side cache of one backend collection.

List transforms key strictly by the resource id (`_id`):
- create appends to the end (no sorting)
- update replaces the matching element; no insert when nothing matches
- delete filters the matching element out
Failures leave the list untouched.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from medicare_client.envelope import Envelope, Failure, Success
from medicare_client.logging_config import get_logger
from medicare_client.notifications import LogNotifier, Notifier
from medicare_client.stores.base import Action, Store

logger = get_logger(__name__)

ID_FIELD = "_id"


class ResourceAction(str, Enum):
    FETCH_START = "FETCH_START"
    FETCH_SUCCESS = "FETCH_SUCCESS"
    FETCH_FAILURE = "FETCH_FAILURE"
    CREATE_START = "CREATE_START"
    CREATE_SUCCESS = "CREATE_SUCCESS"
    CREATE_FAILURE = "CREATE_FAILURE"
    UPDATE_START = "UPDATE_START"
    UPDATE_SUCCESS = "UPDATE_SUCCESS"
    UPDATE_FAILURE = "UPDATE_FAILURE"
    DELETE_START = "DELETE_START"
    DELETE_SUCCESS = "DELETE_SUCCESS"
    DELETE_FAILURE = "DELETE_FAILURE"
    SET_CURRENT = "SET_CURRENT"
    CLEAR_CURRENT = "CLEAR_CURRENT"
    CLEAR_ERROR = "CLEAR_ERROR"


_STARTS = {
    ResourceAction.FETCH_START,
    ResourceAction.CREATE_START,
    ResourceAction.UPDATE_START,
    ResourceAction.DELETE_START,
}
_FAILURES = {
    ResourceAction.FETCH_FAILURE,
    ResourceAction.CREATE_FAILURE,
    ResourceAction.UPDATE_FAILURE,
    ResourceAction.DELETE_FAILURE,
}


@dataclass(frozen=True)
class ResourceState:
    items: Tuple[Dict[str, Any], ...] = ()
    current: Optional[Dict[str, Any]] = None
    is_loading: bool = False
    error: Optional[str] = None


def make_resource_reducer(
    id_field: str = ID_FIELD,
    current_follows_mutations: bool = False
) -> Callable[[ResourceState, Action], ResourceState]:
    """
    Build the reducer for one resource type.

    Args:
        id_field: Key identifying an item
        current_follows_mutations: When True, a successful update makes the
            returned item current and a successful delete clears current.
            When False, callers must refresh `current` themselves.
    """

    def reducer(state: ResourceState, action: Action) -> ResourceState:
        kind = action.type

        if kind in _STARTS:
            return replace(state, is_loading=True, error=None)

        if kind in _FAILURES:
            return replace(state, is_loading=False, error=action.payload)

        if kind == ResourceAction.FETCH_SUCCESS:
            return replace(state, items=tuple(action.payload or ()), is_loading=False, error=None)

        if kind == ResourceAction.CREATE_SUCCESS:
            return replace(
                state,
                items=state.items + (action.payload,),
                current=action.payload,
                is_loading=False,
                error=None
            )

        if kind == ResourceAction.UPDATE_SUCCESS:
            updated = action.payload or {}
            target = updated.get(id_field)
            items = tuple(
                updated if target is not None and item.get(id_field) == target else item
                for item in state.items
            )
            current = action.payload if current_follows_mutations else state.current
            return replace(state, items=items, current=current, is_loading=False, error=None)

        if kind == ResourceAction.DELETE_SUCCESS:
            items = tuple(item for item in state.items if item.get(id_field) != action.payload)
            current = None if current_follows_mutations else state.current
            return replace(state, items=items, current=current, is_loading=False, error=None)

        if kind == ResourceAction.SET_CURRENT:
            return replace(state, current=action.payload)

        if kind == ResourceAction.CLEAR_CURRENT:
            return replace(state, current=None)

        if kind == ResourceAction.CLEAR_ERROR:
            return replace(state, error=None)

        return state

    return reducer


class ResourceStore(Store[ResourceState], ABC):
    """
    Base for per-resource stores.

    Subclasses supply the service calls (`_fetch`, `_create`, `_update`,
    `_delete`) and the resource's display name used in notifications.
    Every operation returns Success(data=...) or Failure(message=...) and
    never raises.
    """

    resource_name = "Resource"
    current_follows_mutations = False

    def __init__(self, notifier: Optional[Notifier] = None):
        self.notifier = notifier or LogNotifier()
        super().__init__(
            make_resource_reducer(ID_FIELD, self.current_follows_mutations),
            ResourceState()
        )

    # Service hooks

    @abstractmethod
    def _fetch(self, owner_id: Optional[str]) -> Envelope:
        ...

    @abstractmethod
    def _create(self, data: Dict[str, Any]) -> Envelope:
        ...

    @abstractmethod
    def _update(self, item_id: str, data: Dict[str, Any]) -> Envelope:
        ...

    @abstractmethod
    def _delete(self, item_id: str) -> Envelope:
        ...

    # Operations

    def fetch_collection(self, owner_id: Optional[str] = None) -> Envelope:
        """Replace the cached collection with the server's. Notifies on error only."""
        return self._run(
            ResourceAction.FETCH_START,
            ResourceAction.FETCH_SUCCESS,
            ResourceAction.FETCH_FAILURE,
            lambda: self._fetch(owner_id),
            success_payload=lambda result: result.data or [],
            verb="fetch",
            notify_success=False,
        )

    def create(self, data: Dict[str, Any]) -> Envelope:
        return self._run(
            ResourceAction.CREATE_START,
            ResourceAction.CREATE_SUCCESS,
            ResourceAction.CREATE_FAILURE,
            lambda: self._create(data),
            success_payload=lambda result: result.data,
            verb="create",
        )

    def update(self, item_id: str, data: Dict[str, Any]) -> Envelope:
        return self._run(
            ResourceAction.UPDATE_START,
            ResourceAction.UPDATE_SUCCESS,
            ResourceAction.UPDATE_FAILURE,
            lambda: self._update(item_id, data),
            success_payload=lambda result: result.data,
            verb="update",
        )

    def remove(self, item_id: str) -> Envelope:
        """Delete by id. Existence is checked by the backend, not here."""
        return self._run(
            ResourceAction.DELETE_START,
            ResourceAction.DELETE_SUCCESS,
            ResourceAction.DELETE_FAILURE,
            lambda: self._delete(item_id),
            success_payload=lambda result: item_id,
            verb="delete",
            return_data=False,
        )

    def set_current(self, item: Optional[Dict[str, Any]]) -> None:
        self.dispatch(ResourceAction.SET_CURRENT, item)

    def clear_current(self) -> None:
        self.dispatch(ResourceAction.CLEAR_CURRENT)

    def clear_error(self) -> None:
        self.dispatch(ResourceAction.CLEAR_ERROR)

    def _run(
        self,
        start: ResourceAction,
        succeeded: ResourceAction,
        failed: ResourceAction,
        call: Callable[[], Envelope],
        success_payload: Callable[[Success], Any],
        verb: str,
        notify_success: bool = True,
        return_data: bool = True
    ) -> Envelope:
        noun = self.resource_name.lower()
        failure_default = f"Failed to {verb} {noun}s" if verb == "fetch" else f"Failed to {verb} {noun}"

        self.dispatch(start)

        try:
            result = call()
        except Exception as e:
            result = Failure(message=str(e) or failure_default)

        if not result.success:
            message = result.message or failure_default
            self.dispatch(failed, message)
            logger.info("resource_action_failed", resource=noun, action=verb, reason=message)
            self.notifier.error(message)
            return Failure(message=message, status=result.status)

        payload = success_payload(result)
        self.dispatch(succeeded, payload)
        if notify_success:
            self.notifier.success(result.message or f"{self.resource_name} {verb}d successfully")

        return Success(data=payload if return_data else None, message=result.message)
