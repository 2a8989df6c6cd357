"""Tests for per-order calculations."""

import pytest

from simulator.simulation.balancer import DriverState
from simulator.simulation.calculator import (
    OrderCalculator, delivery_time, late_penalty, high_value_bonus, fuel_cost
)

from tests.conftest import make_driver, make_route, make_order


class TestDeliveryTime:
    def test_low_traffic_is_base_time(self):
        assert delivery_time(30, "Low", fatigued=False) == 30

    def test_traffic_multipliers(self):
        assert delivery_time(60, "High", fatigued=False) == pytest.approx(75)
        assert delivery_time(50, "Medium", fatigued=False) == pytest.approx(55)

    def test_fatigue_adds_thirty_percent(self):
        for level in ("Low", "Medium", "High"):
            normal = delivery_time(40, level, fatigued=False)
            tired = delivery_time(40, level, fatigued=True)
            assert tired == pytest.approx(normal * 1.3)


class TestPenalty:
    def test_on_boundary_is_not_late(self):
        """Exactly base + 10 is still on time."""
        assert late_penalty(40, 30) == 0

    def test_just_over_boundary_is_late(self):
        assert late_penalty(40.01, 30) == 50

    def test_uses_unrounded_time(self):
        # 51.25 rounds to 51 for display but is still over 41 + 10
        assert late_penalty(delivery_time(41, "High", False), 41) == 50
        assert late_penalty(delivery_time(40, "High", False), 40) == 0


class TestBonus:
    def test_high_value_on_time(self):
        assert high_value_bonus(make_order(value_rs=1200), on_time=True) == pytest.approx(120)

    def test_high_value_late(self):
        assert high_value_bonus(make_order(value_rs=1200), on_time=False) == 0

    def test_threshold_is_exclusive(self):
        assert high_value_bonus(make_order(value_rs=1000), on_time=True) == 0


class TestFuelCost:
    def test_surcharge_difference(self):
        assert fuel_cost(12, "High") - fuel_cost(12, "Low") == 12 * 2

    def test_base_rate(self):
        assert fuel_cost(10, "Medium") == 50


class TestOrderCalculator:
    def test_basic_order(self):
        state = DriverState(make_driver(), 0)
        result, raw_time = OrderCalculator.calculate(make_order(), make_route(), state)

        assert raw_time == 30
        assert result.time_to_deliver_minutes == 30
        assert result.on_time is True
        assert result.penalty == 0
        assert result.bonus == 0
        assert result.fuel_cost == 50
        assert result.profit == 750
        assert result.assigned_driver == "Driver 1"
        assert result.route_id == "R001"

    def test_late_order_profit(self):
        state = DriverState(make_driver(), 0)
        route = make_route(traffic_level="High", base_time_minutes=60)
        result, _ = OrderCalculator.calculate(make_order(value_rs=1500), route, state)

        assert result.on_time is False
        assert result.penalty == 50
        assert result.bonus == 0
        assert result.fuel_cost == 70
        assert result.profit == pytest.approx(1500 - 50 - 70)

    def test_display_time_rounds_to_nearest(self):
        state = DriverState(make_driver(past_hours=(10,)), 0)
        result, raw_time = OrderCalculator.calculate(
            make_order(), make_route(base_time_minutes=31), state
        )
        assert raw_time == pytest.approx(40.3)
        assert result.time_to_deliver_minutes == 40
