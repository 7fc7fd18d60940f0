"""Walk through the cookbook idioms and print what each one does.

Usage: python -m cookbook.demo [--log-level DEBUG] [--only singleton|strategy|builder]
"""
from __future__ import annotations

import argparse
import logging
from typing import Callable

from cookbook.builder import Terrain, VehicleBuilder
from cookbook.logging_config import setup_logging
from cookbook.singletons import demo_service_initialized, get_demo_service
from cookbook.strategy import Animal, BarkStrategy, MeowStrategy

logger = logging.getLogger(__name__)


def run_singleton_demo() -> bool:
    """Show lazy construction and identity. Returns whether identity held."""
    print("\n--- Lazy guarded singleton ---")
    print(f"Constructed before first access? {demo_service_initialized()}")
    first = get_demo_service()
    print(first.show_message())

    second = get_demo_service()
    same = first is second
    print(f"Same instance? {same}")
    return same


def run_strategy_demo() -> bool:
    print("\n--- Strategy ---")
    dog = Animal(BarkStrategy())
    cat = Animal(MeowStrategy())
    print(f"dog says {dog.make_sound()}")
    print(f"cat says {cat.make_sound()}")
    return True


def run_builder_demo() -> bool:
    print("\n--- Builder ---")
    car = (
        VehicleBuilder()
        .with_wheels(4)
        .with_engine("electric")
        .with_doors(4)
        .drives_on(Terrain.LAND)
        .build()
    )
    bike = VehicleBuilder().with_wheels(2).drives_on(Terrain.LAND).build()
    print(f"car:  {car}")
    print(f"bike: {bike}")
    return True


DEMOS: dict[str, Callable[[], bool]] = {
    "singleton": run_singleton_demo,
    "strategy": run_strategy_demo,
    "builder": run_builder_demo,
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--log-level", default=None, help="Override COOKBOOK_LOG_LEVEL")
    p.add_argument("--only", choices=sorted(DEMOS), help="Run a single demo")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    print("Cookbook Demo")
    names = [args.only] if args.only else list(DEMOS)
    ok = True
    for name in names:
        logger.debug(f"Running {name} demo")
        ok = DEMOS[name]() and ok
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
