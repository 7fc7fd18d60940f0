from __future__ import annotations

import dataclasses

import pytest

from cookbook.builder import Terrain, Vehicle, VehicleBuilder


def test_build_car():
    car = (
        VehicleBuilder()
        .with_wheels(4)
        .with_engine("electric")
        .with_doors(4)
        .drives_on(Terrain.LAND)
        .build()
    )
    assert (car.doors, car.engine, car.terrain, car.wheels) == (4, "electric", Terrain.LAND, 4)


def test_build_bike_defaults_unset_fields():
    bike = VehicleBuilder().with_wheels(2).drives_on(Terrain.LAND).build()
    assert (bike.doors, bike.engine, bike.terrain, bike.wheels) == (0, None, Terrain.LAND, 2)


def test_empty_builder():
    assert VehicleBuilder().build() == Vehicle(wheels=0, engine=None, doors=0, terrain=None)


def test_vehicle_is_immutable():
    boat = VehicleBuilder().drives_on(Terrain.WATER).build()
    with pytest.raises(dataclasses.FrozenInstanceError):
        boat.wheels = 3


def test_builder_reuse_produces_independent_vehicles():
    builder = VehicleBuilder().with_wheels(4)
    first = builder.build()
    second = builder.with_doors(2).build()

    assert first.doors == 0
    assert second.doors == 2
