"""Process-wide demo service, reached through an accessor."""

from __future__ import annotations

import logging

from cookbook.config import settings
from cookbook.registry import LazySingleton


logger = logging.getLogger(__name__)


class DemoService:
    """Payload that announces its own construction."""

    def __init__(self):
        logger.info("DemoService: Instance created")

    def show_message(self) -> str:
        message = "DemoService: This is a singleton instance"
        logger.info(message)
        return message


_demo_singleton = LazySingleton(
    DemoService,
    name="demo_service",
    eager=settings.eager_demo_service,
)


def get_demo_service() -> DemoService:
    """Return the demo service singleton."""
    return _demo_singleton.get()


def demo_service_initialized() -> bool:
    """Whether the demo service has been built yet."""
    return _demo_singleton.is_initialized
