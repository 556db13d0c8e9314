"""Failure types raised by the store collaborators and admin services."""

from __future__ import annotations


class StoreError(Exception):
    """The external data store rejected or failed a request."""


class FetchError(StoreError):
    """A read (select) against the store failed."""


class MutationError(StoreError):
    """An insert, update or delete against the store failed."""


class UploadError(Exception):
    """A binary asset could not be stored in the object store."""


class DraftValidationError(ValueError):
    """A draft buffer has blank required fields or malformed values."""

    def __init__(self, missing: list[str], message: str | None = None):
        self.missing = missing
        super().__init__(message or f"Missing required fields: {', '.join(missing)}")
