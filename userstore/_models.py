from __future__ import annotations

from typing import Literal, TypeAlias, Union

from pydantic import BaseModel, ConfigDict


__all__ = (
    "Action",
    "AddUser",
    "RemoveAllUsers",
    "State",
    "UserRecord",

    "seed_state"
)


class UserRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    email: str


class AddUser(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["add_user"] = "add_user"
    record: UserRecord

    @classmethod
    def of(cls, username: str, email: str) -> AddUser:
        return cls(record=UserRecord(username=username, email=email))


class RemoveAllUsers(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["remove_all_users"] = "remove_all_users"


Action: TypeAlias = Union[AddUser, RemoveAllUsers]
State: TypeAlias = tuple[UserRecord, ...]


def seed_state() -> State:
    return (UserRecord(username="example1", email="example1@yopmail.com"),)
