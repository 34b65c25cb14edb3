"""Reducer-backed client-side stores."""
from medicare_client.stores.appointments import AppointmentStore
from medicare_client.stores.base import Action, Store
from medicare_client.stores.resources import ResourceAction, ResourceState, ResourceStore
from medicare_client.stores.reviews import ReviewStore
from medicare_client.stores.session import AuthStatus, SessionAction, SessionState, SessionStore

__all__ = [
    "Action",
    "AppointmentStore",
    "AuthStatus",
    "ResourceAction",
    "ResourceState",
    "ResourceStore",
    "ReviewStore",
    "SessionAction",
    "SessionState",
    "SessionStore",
    "Store",
]
