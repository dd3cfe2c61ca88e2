"""A small social graph of users with interfaces, unions and paging."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

__all__ = ["SCHEMA", "Page", "User", "USERS", "Resolver"]

SCHEMA = """
	schema {
		query: Query
	}

	type Query {
		admin(id: ID!, role: Role = ADMIN): Admin!
		user(id: ID!): User!
		search(text: String!): [SearchResult]!
	}

	interface Admin {
		id: ID!
		name: String!
		role: Role!
	}

	interface Person {
		name: String!
	}

	scalar Time

	type User implements Admin & Person {
		id: ID!
		name: String!
		email: String!
		role: Role!
		phone: String!
		address: [String!]
		friends(page: Pagination): [User]
		createdAt: Time!
	}

	input Pagination {
	  	first: Int
	  	last: Int
	}

	enum Role {
		ADMIN
		USER
	}

	union SearchResult = User
"""


@dataclass
class Page:
    """Paging arguments for a friends list."""

    first: float | None = None
    last: float | None = None


@dataclass(eq=False)
class User:
    """A member of the social graph."""

    id: str
    name: str
    role: str
    address: list[str] | None = None
    friend_list: list[User] = field(default_factory=list, repr=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    email: str = ""
    phone: str = ""

    def friends(self, page: Page | None = None) -> list[User]:
        """Return a page of this user's friends."""
        count = len(self.friend_list)
        start, stop = 0, count
        if page is not None:
            if page.first is not None:
                start = int(page.first)
                if start > count:
                    raise ValueError("not enough users")
            if page.last is not None:
                stop = int(page.last)
                if stop == 0 or stop > count:
                    stop = count
        if start < 0 or stop < start:
            raise ValueError(f"slice bounds out of range [{start}:{stop}]")
        return self.friend_list[start:stop]


def _make_users() -> list[User]:
    albus = User("0x01", "Albus Dumbledore", "ADMIN",
                 ["Office @ Hogwarts", "where Horcruxes are"], email="[email]", phone="[phone]")
    harry = User("0x02", "Harry Potter", "USER",
                 ["123 dorm room @ Hogwarts", "456 random place"], email="[email]", phone="[phone]")
    hermione = User("0x03", "Hermione Granger", "USER",
                    ["233 dorm room @ Hogwarts", "786 @ random place"], email="[email]", phone="[phone]")
    ronald = User("0x04", "Ronald Weasley", "USER",
                  ["411 dorm room @ Hogwarts", "981 @ random place"], email="[email]", phone="[phone]")
    albus.friend_list = [harry]
    harry.friend_list = [albus, hermione, ronald]
    hermione.friend_list = [harry, ronald]
    ronald.friend_list = [harry, hermione]
    return [albus, harry, hermione, ronald]


USERS: list[User] = _make_users()
_USERS_BY_ID: dict[str, User] = {u.id: u for u in USERS}


class Resolver:
    """Root query resolver."""

    def admin(self, ctx: Any, user_id: str, role: str = "ADMIN") -> User:
        user = _USERS_BY_ID.get(user_id)
        if user is not None and user.role == role:
            return user
        raise LookupError(f"user with id={user_id} and role={role} does not exist")

    def user(self, ctx: Any, user_id: str) -> User:
        user = _USERS_BY_ID.get(user_id)
        if user is None:
            raise LookupError(f"user with id={user_id} does not exist")
        return user

    def search(self, ctx: Any, text: str) -> list[User]:
        return [u for u in USERS if text in u.name]