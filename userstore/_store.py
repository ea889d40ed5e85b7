from __future__ import annotations

import inspect
import logging

from typing import (
    Callable,
    Generic,
    Optional,
    Protocol,
    TypeVar,
    Union,
    runtime_checkable
)

from uuid import UUID, uuid4

from ._models import Action, State, seed_state
from ._reducer import Reducer, reduce_users


__all__ = (
    "Dispatch",
    "Middleware",
    "Observer",
    "StateFactory",
    "Store",
    "Subscriber",
    "Subscription",

    "create_store",
    "logging_middleware"
)


_logger = logging.getLogger(__name__)


A = TypeVar("A")
S = TypeVar("S")


@runtime_checkable
class Observer(Protocol[S]):
    def on_state_change(self, new_state: S) -> None:
        ...


Subscriber = Union[Callable[[S], None], Observer[S]]
Dispatch = Callable[[A], S]
StateFactory = Callable[[], S]


def _is_same_subscriber(subscriber: Subscriber, target: Subscriber) -> bool:
    # Bound methods are recreated on every attribute access.
    if inspect.ismethod(subscriber) and inspect.ismethod(target):
        return (
            subscriber.__self__ is target.__self__
            and subscriber.__func__ is target.__func__
        )

    return subscriber is target


class Subscription:
    """Handle for a single subscriber slot.

    Calling the handle removes the slot from the store it came from.
    """

    id: UUID
    subscriber: Subscriber

    def __init__(self, store: Store, subscriber: Subscriber) -> None:
        self.id = uuid4()
        self.subscriber = subscriber

        self._store = store

    def __call__(self) -> None:
        self._store.unsubscribe(self)

    def __repr__(self) -> str:
        return f"Subscription(id={self.id!s})"


class Store(Generic[S, A]):
    def __init__(self, state: S, reducer: Reducer[S, A]) -> None:
        self._state = state
        self._reducer = reducer
        self._subscriptions: dict[UUID, Subscription] = {}
        self._revision = 0

    def _notify(self, state: S, revision: int) -> None:
        for subscription in list(self._subscriptions.values()):
            # A nested dispatch has already fanned out a newer state.
            if revision != self._revision:
                return

            if subscription.id not in self._subscriptions:
                continue

            subscriber = subscription.subscriber

            if isinstance(subscriber, Observer):
                subscriber.on_state_change(state)
            else:
                subscriber(state)

    def get_state(self) -> S:
        return self._state

    def dispatch(self, action: A) -> S:
        state = self._reducer.apply(self._state, action)

        self._state = state
        self._revision += 1
        self._notify(state, self._revision)

        return state

    def subscribe(self, subscriber: Subscriber) -> Subscription:
        subscription = Subscription(self, subscriber)
        self._subscriptions[subscription.id] = subscription

        _logger.debug("Subscribed %r as %s", subscriber, subscription.id)

        return subscription

    def unsubscribe(self, target: Union[Subscription, Subscriber]) -> None:
        if isinstance(target, Subscription):
            removed = [target.id] if target.id in self._subscriptions else []
        else:
            removed = [
                subscription.id
                for subscription in self._subscriptions.values()
                if _is_same_subscriber(subscription.subscriber, target)
            ]

        for subscription_id in removed:
            del self._subscriptions[subscription_id]

            _logger.debug("Unsubscribed %s", subscription_id)


Middleware = Callable[[Store[S, A], Dispatch, A], S]


def _chain(
    store: Store[S, A],
    middleware: Middleware,
    next_dispatch: Dispatch
) -> Dispatch:
    def dispatch(action: A) -> S:
        return middleware(store, next_dispatch, action)

    return dispatch


def _apply_middleware(store: Store[S, A], middleware: list[Middleware]) -> None:
    enhanced_dispatch: Dispatch = store.dispatch

    for callable in reversed(middleware):
        enhanced_dispatch = _chain(store, callable, enhanced_dispatch)

    setattr(store, "dispatch", enhanced_dispatch)


def logging_middleware(
    store: Store[S, A],
    next_dispatch: Dispatch,
    action: A
) -> S:
    _logger.debug("Dispatching %r", action)

    state = next_dispatch(action)

    _logger.info("State changed: %r", state)

    return state


def create_store(
    reducer: Reducer[State, Action] = reduce_users,
    initial_state_factory: Optional[StateFactory] = None,
    middleware: Optional[list[Middleware]] = None
) -> Store[State, Action]:
    factory = initial_state_factory or seed_state
    store = Store(factory(), reducer)

    if middleware:
        _apply_middleware(store, middleware)

    return store
