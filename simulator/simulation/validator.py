"""Run parameter and input data validation"""
from collections import Counter
from numbers import Number
from typing import List

from simulator.config import TRAFFIC_LEVELS, ORDER_STATUSES
from simulator.models import Driver, Route, Order, RunParameters


class ParameterValidator:
    """Validates run parameters before a simulation is started"""

    @staticmethod
    def validate(params: RunParameters) -> List[str]:
        issues = []

        drivers = params.number_of_drivers
        if isinstance(drivers, bool) or not isinstance(drivers, int):
            issues.append(f"PARAMS: number_of_drivers must be an integer, got {drivers!r}")
        elif drivers < 1:
            issues.append(f"PARAMS: number_of_drivers must be at least 1, got {drivers}")

        start = params.route_start_time
        if not isinstance(start, str) or not start.strip():
            issues.append("PARAMS: route_start_time is required")

        max_hours = params.max_hours_per_driver
        if isinstance(max_hours, bool) or not isinstance(max_hours, Number):
            issues.append(f"PARAMS: max_hours_per_driver must be a number, got {max_hours!r}")
        elif max_hours < 1:
            issues.append(f"PARAMS: max_hours_per_driver must be at least 1, got {max_hours}")

        return issues


class InputValidator:
    """Validates drivers, routes and orders against the data rules"""

    def __init__(self, drivers: List[Driver], routes: List[Route], orders: List[Order]):
        self.drivers = drivers
        self.routes = routes
        self.orders = orders
        self.route_ids = {r.route_id for r in routes}

    def validate(self) -> List[str]:
        """Return a list of issues; an empty list means the data is clean"""
        issues = []
        issues.extend(self._validate_drivers())
        issues.extend(self._validate_routes())
        issues.extend(self._validate_orders())
        return issues

    def _validate_drivers(self) -> List[str]:
        issues = []
        for driver in self.drivers:
            if any(h < 0 for h in driver.past_7_day_hours):
                issues.append(f"DRIVER: {driver.name} has negative hours in past_7_day_hours")
            if driver.current_shift_hours < 0:
                issues.append(f"DRIVER: {driver.name} has negative current_shift_hours")
        return issues

    def _validate_routes(self) -> List[str]:
        issues = []
        for route_id, count in Counter(r.route_id for r in self.routes).items():
            if count > 1:
                issues.append(f"ROUTE: duplicate route_id {route_id} ({count} times)")

        for route in self.routes:
            if route.distance_km <= 0:
                issues.append(f"ROUTE: {route.route_id} distance_km must be positive")
            if route.base_time_minutes <= 0:
                issues.append(f"ROUTE: {route.route_id} base_time_minutes must be positive")
            if route.traffic_level not in TRAFFIC_LEVELS:
                # The engine still runs these as Low traffic
                issues.append(
                    f"TRAFFIC: {route.route_id} has unrecognized traffic level "
                    f"{route.traffic_level!r}, treated as Low"
                )
        return issues

    def _validate_orders(self) -> List[str]:
        issues = []
        for order_id, count in Counter(o.order_id for o in self.orders).items():
            if count > 1:
                issues.append(f"ORDER: duplicate order_id {order_id} ({count} times)")

        for order in self.orders:
            if order.value_rs <= 0:
                issues.append(f"ORDER: {order.order_id} value_rs must be positive")
            if order.status not in ORDER_STATUSES:
                issues.append(f"ORDER: {order.order_id} has unknown status {order.status!r}")
            if order.assigned_route_id not in self.route_ids:
                issues.append(
                    f"ROUTE MISSING: {order.order_id} references unknown route "
                    f"{order.assigned_route_id}"
                )
        return issues
