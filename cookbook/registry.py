"""Shared lazy singleton utilities.

A :class:`LazySingleton` builds its value from a factory the first time
``get()`` is called and hands back that same object forever after. The
check-and-construct sequence is guarded by a ``threading.Lock`` so the
factory runs at most once no matter how many threads race on first access.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, TypeVar

from cookbook import metrics
from cookbook.errors import ConstructionFailure

T = TypeVar("T")

logger = logging.getLogger(__name__)


class LazySingleton(Generic[T]):
    """Create a singleton lazily from a factory function.

    Pass ``eager=True`` to construct at declaration time instead of on
    first access.
    """

    def __init__(
        self,
        factory: Callable[[], T],
        name: str | None = None,
        eager: bool = False,
    ):
        self._factory = factory
        self._name = name or getattr(factory, "__name__", "singleton")
        self._instance: T | None = None
        self._initialized = False
        self._lock = threading.Lock()
        # Ident of the thread currently running the factory, if any.
        self._constructing: int | None = None
        if eager:
            self.get()

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_initialized(self) -> bool:
        """Whether the instance has been built. Never triggers construction."""
        return self._initialized

    def get(self) -> T:
        # Fast path: the flag is only set after the instance is stored.
        if self._initialized:
            return self._instance  # type: ignore[return-value]

        # A factory that asks for its own holder would wait on the lock forever.
        if self._constructing == threading.get_ident():
            raise ConstructionFailure(self._name, "re-entrant construction")

        with self._lock:
            if not self._initialized:
                self._constructing = threading.get_ident()
                try:
                    instance = self._factory()
                except Exception as e:
                    metrics.singleton_construction_failures.labels(holder=self._name).inc()
                    logger.error(f"Singleton '{self._name}' construction failed: {e}")
                    raise ConstructionFailure(self._name) from e
                finally:
                    self._constructing = None
                self._instance = instance
                self._initialized = True
                metrics.singleton_constructions.labels(holder=self._name).inc()
                logger.info(f"Singleton '{self._name}' initialized")
        return self._instance  # type: ignore[return-value]
