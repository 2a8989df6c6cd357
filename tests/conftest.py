"""Shared test fixtures."""

import pytest

from simulator.models import Driver, Route, Order, RunParameters


def make_driver(name="Driver 1", past_hours=(7,), driver_id=None, is_active=True):
    return Driver({
        "driver_id": driver_id or name,
        "name": name,
        "past_7_day_hours": list(past_hours),
        "is_active": is_active,
    })


def make_route(route_id="R001", distance_km=10, traffic_level="Low", base_time_minutes=30):
    return Route({
        "route_id": route_id,
        "distance_km": distance_km,
        "traffic_level": traffic_level,
        "base_time_minutes": base_time_minutes,
    })


def make_order(order_id="O001", value_rs=800, route_id="R001"):
    return Order({
        "order_id": order_id,
        "value_rs": value_rs,
        "assigned_route_id": route_id,
    })


def make_params(number_of_drivers=1, route_start_time="09:00", max_hours_per_driver=8):
    return RunParameters(
        number_of_drivers=number_of_drivers,
        route_start_time=route_start_time,
        max_hours_per_driver=max_hours_per_driver,
    )


@pytest.fixture
def driver():
    return make_driver()


@pytest.fixture
def fatigued_driver():
    return make_driver(name="Fatigued Driver", past_hours=(7, 9))


@pytest.fixture
def low_route():
    return make_route()


@pytest.fixture
def params():
    return make_params()
