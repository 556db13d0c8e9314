"""
Fetch, mutate, re-fetch.

Every admin table works the same way: load the list, let the admin create,
edit or delete a record, and after each successful mutation throw the local
list away and load it again from the store. Nothing is updated
optimistically, so what the table shows is always something the store
returned.

List loads are tagged with a generation number. Changing the scope (for
example the selected competition) or starting another load bumps the
generation, and a response whose generation is no longer current is
dropped instead of overwriting newer data.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar
from uuid import UUID

from backend.errors import FetchError, MutationError
from backend.services.notifier import Notifier

logger = logging.getLogger(__name__)

T = TypeVar("T")
D = TypeVar("D")

Confirm = Callable[[str], bool]


@dataclass(frozen=True)
class CrudMessages:
    """User-facing notification texts for one entity type."""

    fetch_failed: str
    created: str = "Created successfully"
    create_failed: str = "Failed to create"
    updated: str = "Updated successfully"
    update_failed: str = "Failed to update"
    deleted: str = "Deleted successfully"
    delete_failed: str = "Failed to delete"
    confirm_delete: str = "Are you sure you want to delete this?"


class CrudBackend(Generic[T, D]):
    """
    Capability set behind a CrudSync.

    Subclasses override the operations their entity supports; the rest
    raise NotImplementedError.
    """

    async def list_items(self, scope: Any | None) -> list[T]:
        raise NotImplementedError

    async def create(self, draft: D) -> T:
        raise NotImplementedError

    async def update(self, item_id: UUID, draft: D) -> T | None:
        raise NotImplementedError

    async def delete(self, item_id: UUID) -> bool:
        raise NotImplementedError


class CrudSync(Generic[T, D]):
    """Local copy of a store-backed list, kept in step by full re-fetches."""

    def __init__(
        self,
        backend: CrudBackend[T, D],
        notifier: Notifier,
        messages: CrudMessages,
        scope: Any | None = None,
    ):
        self.backend = backend
        self.notifier = notifier
        self.messages = messages
        self.scope = scope
        self.items: list[T] = []
        self.loading = False
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    async def refresh(self) -> bool:
        """
        Reload the list for the current scope.

        Returns:
            True if the response was applied; False if the fetch failed or
            a newer load superseded it
        """
        self._generation += 1
        generation = self._generation
        self.loading = True
        try:
            items = await self.backend.list_items(self.scope)
        except FetchError:
            if generation == self._generation:
                self.loading = False
                self.notifier.error(self.messages.fetch_failed)
            return False

        if generation != self._generation:
            logger.debug("dropping stale list response (generation %d, current %d)", generation, self._generation)
            return False

        self.items = items
        self.loading = False
        return True

    async def select_scope(self, scope: Any | None) -> bool:
        """
        Switch the list to another scope and reload it.

        A None scope clears the list without asking the store.
        """
        self.scope = scope
        if scope is None:
            self._generation += 1
            self.items = []
            self.loading = False
            return True
        return await self.refresh()

    async def create(self, draft: D) -> bool:
        try:
            await self.backend.create(draft)
        except MutationError:
            self.notifier.error(self.messages.create_failed)
            return False
        self.notifier.success(self.messages.created)
        await self.refresh()
        return True

    async def update(self, item_id: UUID, draft: D, refresh: bool = True) -> bool:
        """
        Update one record.

        Args:
            item_id: Record id
            draft: Whatever the backend's update accepts
            refresh: Re-fetch the list afterwards. Callers that need to act
                between the write and the re-fetch pass False and call
                refresh() themselves.
        """
        try:
            await self.backend.update(item_id, draft)
        except MutationError:
            self.notifier.error(self.messages.update_failed)
            return False
        self.notifier.success(self.messages.updated)
        if refresh:
            await self.refresh()
        return True

    async def delete(self, item_id: UUID, confirm: Confirm) -> bool:
        """
        Delete one record after an explicit yes from `confirm`.

        There is no undo. A "no" issues no store call.
        """
        if not confirm(self.messages.confirm_delete):
            return False
        try:
            await self.backend.delete(item_id)
        except MutationError:
            self.notifier.error(self.messages.delete_failed)
            return False
        self.notifier.success(self.messages.deleted)
        await self.refresh()
        return True
