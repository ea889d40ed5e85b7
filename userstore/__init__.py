from ._errors import ConfigError, StoreError, UnknownActionError
from ._models import (
    Action,
    AddUser,
    RemoveAllUsers,
    State,
    UserRecord,
    seed_state
)
from ._reducer import Reducer, UserReducer, reduce_users
from ._store import (
    Dispatch,
    Middleware,
    Observer,
    StateFactory,
    Store,
    Subscriber,
    Subscription,
    create_store,
    logging_middleware
)
from .config import StoreConfig


__all__ = (
    "Action",
    "AddUser",
    "ConfigError",
    "Dispatch",
    "Middleware",
    "Observer",
    "Reducer",
    "RemoveAllUsers",
    "State",
    "StateFactory",
    "Store",
    "StoreConfig",
    "StoreError",
    "Subscriber",
    "Subscription",
    "UnknownActionError",
    "UserRecord",
    "UserReducer",

    "create_store",
    "logging_middleware",
    "reduce_users",
    "seed_state"
)
