from __future__ import annotations

import asyncio
import logging

from asyncio import TimerHandle
from typing import Callable, Optional

from ._models import Action, AddUser, RemoveAllUsers, State, UserRecord
from ._store import Store, Subscription, create_store, logging_middleware
from .config import StoreConfig


__all__ = (
    "UserListView",

    "fetch_users_later",
    "format_user",
    "run_demo"
)


_logger = logging.getLogger(__name__)


Renderer = Callable[[list[str]], None]


def format_user(record: UserRecord) -> str:
    return f"{record.username} ({record.email})"


class UserListView:
    """Headless list of users kept in sync with a store.

    The view renders only what it is handed, either on attach or through
    ``on_state_change``.
    """

    _store: Optional[Store[State, Action]]
    _subscription: Optional[Subscription]

    def __init__(self, renderer: Optional[Renderer] = None) -> None:
        self.lines: list[str] = []

        self._renderer = renderer
        self._store = None
        self._subscription = None

    @property
    def attached(self) -> bool:
        return self._subscription is not None

    def attach(self, store: Store[State, Action]) -> None:
        if self._subscription is not None:
            if self._store is store:
                return

            self.detach()

        self._store = store
        self._subscription = store.subscribe(self)
        self._render(store.get_state())

    def detach(self) -> None:
        if self._subscription is None:
            return

        self._subscription()
        self._subscription = None
        self._store = None

    def remove_all_users(self) -> None:
        if self._store is None:
            return

        self._store.dispatch(RemoveAllUsers())

    def on_state_change(self, new_state: State) -> None:
        self._render(new_state)

    def _render(self, users: State) -> None:
        self.lines = [format_user(user) for user in users]

        if self._renderer is not None:
            self._renderer(self.lines)


def _fetch_users(store: Store[State, Action]) -> None:
    store.dispatch(AddUser.of("joe", "joe@yopmail.com"))
    store.dispatch(AddUser.of("jose", "jose@yopmail.com"))


def fetch_users_later(
    store: Store[State, Action],
    delay: float
) -> TimerHandle:
    loop = asyncio.get_running_loop()

    return loop.call_later(delay, _fetch_users, store)


async def run_demo(
    store: Optional[Store[State, Action]] = None,
    config: Optional[StoreConfig] = None,
    renderer: Optional[Renderer] = None
) -> UserListView:
    config = config or StoreConfig()

    if store is None:
        middleware = [logging_middleware] if config.log_state_changes else []
        store = create_store(middleware=middleware)

    view = UserListView(renderer)
    view.attach(store)

    fetch = fetch_users_later(store, config.fetch_delay)

    try:
        await asyncio.sleep(config.lifetime)
    finally:
        fetch.cancel()
        view.detach()

    _logger.debug("Demo finished with %d users", len(store.get_state()))

    return view
