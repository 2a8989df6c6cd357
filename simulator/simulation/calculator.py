"""Per-order timing and financial calculations"""
from typing import Tuple

from simulator.config import (
    FATIGUE_TIME_MULTIPLIER, LATE_GRACE_MINUTES, LATE_PENALTY,
    HIGH_VALUE_BONUS_RATE
)
from simulator.models import Order, Route, OrderResult
from simulator.simulation.balancer import DriverState
from simulator.simulation.traffic import traffic_time_multiplier, fuel_cost_per_km
from simulator.utils import round_half_up


def delivery_time(base_time_minutes: float, traffic_level: str, fatigued: bool) -> float:
    """Minutes to deliver, unrounded"""
    fatigue_multiplier = FATIGUE_TIME_MULTIPLIER if fatigued else 1.0
    return base_time_minutes * (1 + traffic_time_multiplier(traffic_level)) * fatigue_multiplier


def late_penalty(time_to_deliver: float, base_time_minutes: float) -> float:
    """Flat penalty when the delivery runs more than the grace period over base time"""
    return LATE_PENALTY if time_to_deliver > base_time_minutes + LATE_GRACE_MINUTES else 0


def high_value_bonus(order: Order, on_time: bool) -> float:
    return HIGH_VALUE_BONUS_RATE * order.value_rs if order.is_high_value and on_time else 0


def fuel_cost(distance_km: float, traffic_level: str) -> float:
    return distance_km * fuel_cost_per_km(traffic_level)


class OrderCalculator:
    """Computes the outcome of delivering one order with one driver"""

    @staticmethod
    def calculate(order: Order, route: Route, driver: DriverState) -> Tuple[OrderResult, float]:
        """
        Returns the order result and the unrounded delivery time.
        The raw time is what the driver's load is charged with (rounded up).
        """
        time_to_deliver = delivery_time(
            route.base_time_minutes, route.traffic_level, driver.was_fatigued_yesterday
        )

        penalty = late_penalty(time_to_deliver, route.base_time_minutes)
        on_time = penalty == 0
        bonus = high_value_bonus(order, on_time)
        fuel = fuel_cost(route.distance_km, route.traffic_level)
        profit = order.value_rs + bonus - penalty - fuel

        result = OrderResult(
            order_id=order.order_id,
            route_id=route.route_id,
            value_rs=order.value_rs,
            time_to_deliver_minutes=round_half_up(time_to_deliver),
            on_time=on_time,
            penalty=penalty,
            bonus=bonus,
            fuel_cost=fuel,
            profit=profit,
            assigned_driver=driver.name
        )
        return result, time_to_deliver
