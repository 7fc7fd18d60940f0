"""Exceptions raised by the cookbook package."""

from __future__ import annotations


class CookbookError(Exception):
    """Base class for cookbook errors."""


class ConstructionFailure(CookbookError):
    """A singleton factory raised while building the instance.

    The holder stays uninitialized, so a later ``get()`` retries.
    The original exception is available as ``__cause__``.
    """

    def __init__(self, holder: str, message: str | None = None):
        self.holder = holder
        super().__init__(message or f"Failed to construct singleton '{holder}'")
