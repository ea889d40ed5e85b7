from typing import Generic, TypeVar

from ._errors import UnknownActionError
from ._models import Action, AddUser, RemoveAllUsers, State


A = TypeVar("A")
S = TypeVar("S")


__all__ = (
    "Reducer",
    "UserReducer",

    "reduce_users"
)


class Reducer(Generic[S, A]):
    def apply(self, state: S, action: A) -> S:
        raise NotImplementedError

    def __call__(self, state: S, action: A) -> S:
        return self.apply(state, action)


class UserReducer(Reducer[State, Action]):
    def apply(self, state: State, action: Action) -> State:
        if isinstance(action, AddUser):
            return (*state, action.record)

        if isinstance(action, RemoveAllUsers):
            return ()

        raise UnknownActionError(action)


reduce_users = UserReducer()
