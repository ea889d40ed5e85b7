from __future__ import annotations

import asyncio

import pytest

from userstore import AddUser, State, StoreConfig, UserRecord, create_store
from userstore.demo import UserListView, fetch_users_later, format_user, run_demo


def test_format_user() -> None:
    record = UserRecord(username="joe", email="joe@yopmail.com")

    assert format_user(record) == "joe (joe@yopmail.com)"


def test_view_renders_on_attach_and_change() -> None:
    store = create_store()
    rendered: list[list[str]] = []
    view = UserListView(rendered.append)

    view.attach(store)
    store.dispatch(AddUser.of("joe", "joe@yopmail.com"))

    assert view.attached
    assert rendered == [
        ["example1 (example1@yopmail.com)"],
        ["example1 (example1@yopmail.com)", "joe (joe@yopmail.com)"],
    ]


def test_attach_twice_subscribes_once() -> None:
    store = create_store()
    rendered: list[list[str]] = []
    view = UserListView(rendered.append)

    view.attach(store)
    view.attach(store)
    store.dispatch(AddUser.of("joe", "joe@yopmail.com"))

    assert len(rendered) == 2


def test_detached_view_stops_rendering() -> None:
    store = create_store()
    view = UserListView()

    view.attach(store)
    view.detach()
    store.dispatch(AddUser.of("joe", "joe@yopmail.com"))

    assert not view.attached
    assert view.lines == ["example1 (example1@yopmail.com)"]


def test_remove_all_users_button() -> None:
    store = create_store()
    view = UserListView()

    view.attach(store)
    view.remove_all_users()

    assert store.get_state() == ()
    assert view.lines == []


@pytest.mark.asyncio
async def test_fetch_users_later_dispatches_both_users() -> None:
    store = create_store()
    fetched: asyncio.Future[State] = asyncio.get_running_loop().create_future()

    def resolve(state: State) -> None:
        if len(state) == 3 and not fetched.done():
            fetched.set_result(state)

    store.subscribe(resolve)
    fetch_users_later(store, 0)

    await asyncio.wait_for(fetched, timeout=5.0)

    assert [user.username for user in store.get_state()] == ["example1", "joe", "jose"]


@pytest.mark.asyncio
async def test_run_demo() -> None:
    store = create_store()
    rendered: list[list[str]] = []

    view = await run_demo(
        store,
        StoreConfig(fetch_delay=0, lifetime=0.1),
        rendered.append
    )

    assert not view.attached
    assert rendered == [
        ["example1 (example1@yopmail.com)"],
        ["example1 (example1@yopmail.com)", "joe (joe@yopmail.com)"],
        [
            "example1 (example1@yopmail.com)",
            "joe (joe@yopmail.com)",
            "jose (jose@yopmail.com)",
        ],
    ]


@pytest.mark.asyncio
async def test_run_demo_cancels_pending_fetch() -> None:
    store = create_store()

    view = await run_demo(store, StoreConfig(fetch_delay=10.0, lifetime=0.01))
    await asyncio.sleep(0)

    assert view.lines == ["example1 (example1@yopmail.com)"]
    assert len(store.get_state()) == 1


def test_attach_to_another_store_moves_the_view() -> None:
    first = create_store()
    second = create_store(initial_state_factory=lambda: ())
    view = UserListView()

    view.attach(first)
    view.attach(second)
    first.dispatch(AddUser.of("joe", "joe@yopmail.com"))

    assert view.lines == []

    view.remove_all_users()
    second.dispatch(AddUser.of("jose", "jose@yopmail.com"))

    assert first.get_state()[-1].username == "joe"
    assert view.lines == ["jose (jose@yopmail.com)"]
