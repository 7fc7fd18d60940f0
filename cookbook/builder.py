"""Fluent builder for vehicles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Terrain(str, Enum):
    """Where a vehicle can travel."""
    LAND = "land"
    WATER = "water"
    AIR = "air"


@dataclass(frozen=True)
class Vehicle:
    wheels: int
    engine: str | None
    doors: int
    terrain: Terrain | None


class VehicleBuilder:
    """Collects vehicle attributes one call at a time.

    Every setter returns the builder so calls can be chained:

        VehicleBuilder().with_wheels(2).drives_on(Terrain.LAND).build()

    Attributes that are never set default to ``0`` or ``None``.
    """

    def __init__(self):
        self._wheels = 0
        self._engine: str | None = None
        self._doors = 0
        self._terrain: Terrain | None = None

    def with_wheels(self, wheels: int) -> VehicleBuilder:
        self._wheels = wheels
        return self

    def with_engine(self, engine: str) -> VehicleBuilder:
        self._engine = engine
        return self

    def with_doors(self, doors: int) -> VehicleBuilder:
        self._doors = doors
        return self

    def drives_on(self, terrain: Terrain) -> VehicleBuilder:
        self._terrain = terrain
        return self

    def build(self) -> Vehicle:
        return Vehicle(
            wheels=self._wheels,
            engine=self._engine,
            doors=self._doors,
            terrain=self._terrain,
        )
