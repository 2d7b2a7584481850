"""Keyed record stores.

Learn: Services only talk to the Store protocol below, never to a concrete
container. InMemoryStore is the shipped backend; swapping in a durable one
means implementing the same six async methods.

Every operation on an InMemoryStore holds that store's asyncio.Lock, so
writes are serialized and readers never observe a write in progress.
Stores are independent: there are no cross-store transactions.
"""

import asyncio
import dataclasses
from typing import Any, Callable, Generic, Optional, Protocol, TypeVar

from mentorhub.db.models import User

T = TypeVar("T")

Predicate = Callable[[Any], bool]


class DuplicateEmailError(ValueError):
    """Raised when a user with the same email already exists."""


class Store(Protocol[T]):
    async def insert(self, item: T) -> T: ...

    async def get(self, item_id: str) -> Optional[T]: ...

    async def find(self, predicate: Optional[Predicate] = None) -> list[T]: ...

    async def find_one(self, predicate: Predicate) -> Optional[T]: ...

    async def update(self, item_id: str, **changes: Any) -> Optional[T]: ...

    async def delete(self, item_id: str) -> bool: ...


class InMemoryStore(Generic[T]):
    """Insertion-ordered list of frozen dataclass records keyed by ``id``."""

    def __init__(self) -> None:
        self._items: list[T] = []
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._items)

    def _index_of(self, item_id: str) -> int:
        for i, item in enumerate(self._items):
            if item.id == item_id:
                return i
        return -1

    async def insert(self, item: T) -> T:
        async with self._lock:
            self._items.append(item)
            return item

    async def get(self, item_id: str) -> Optional[T]:
        async with self._lock:
            i = self._index_of(item_id)
            return self._items[i] if i >= 0 else None

    async def find(self, predicate: Optional[Predicate] = None) -> list[T]:
        async with self._lock:
            if predicate is None:
                return list(self._items)
            return [item for item in self._items if predicate(item)]

    async def find_one(self, predicate: Predicate) -> Optional[T]:
        async with self._lock:
            return next((item for item in self._items if predicate(item)), None)

    async def update(self, item_id: str, **changes: Any) -> Optional[T]:
        """Replace the record with a copy carrying ``changes``. None if absent."""
        async with self._lock:
            i = self._index_of(item_id)
            if i < 0:
                return None
            self._items[i] = dataclasses.replace(self._items[i], **changes)
            return self._items[i]

    async def delete(self, item_id: str) -> bool:
        async with self._lock:
            i = self._index_of(item_id)
            if i < 0:
                return False
            del self._items[i]
            return True


class UserStore(InMemoryStore[User]):
    """Credential store. Email uniqueness is enforced on insert."""

    async def create(self, user: User) -> User:
        # Check-and-insert under one lock so two concurrent registrations
        # for the same email cannot both succeed.
        async with self._lock:
            if any(u.email == user.email for u in self._items):
                raise DuplicateEmailError(user.email)
            self._items.append(user)
            return user

    async def insert(self, item: User) -> User:
        return await self.create(item)

    async def find_by_email(self, email: str) -> Optional[User]:
        return await self.find_one(lambda u: u.email == email)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return await self.get(user_id)
