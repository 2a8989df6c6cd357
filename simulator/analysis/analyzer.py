"""KPI aggregation and data analysis"""
from dataclasses import dataclass, field, replace
from typing import Dict, Any, List

from simulator.config import TRAFFIC_LEVELS
from simulator.models import Order, Route, OrderResult, SimulationKPIs, DriverWorkload
from simulator.simulation.traffic import normalize_traffic_level
from simulator.utils import round_half_up, round_half_up_to


def _empty_fuel_breakdown() -> Dict[str, float]:
    return {level: 0 for level in TRAFFIC_LEVELS}


@dataclass(frozen=True)
class RunTotals:
    """Running totals of a simulation, folded over the processed orders"""

    total_profit: float = 0
    on_time_deliveries: int = 0
    total_deliveries: int = 0
    fuel_cost_breakdown: Dict[str, float] = field(default_factory=_empty_fuel_breakdown)

    def record(self, result: OrderResult, traffic_level: str = None) -> 'RunTotals':
        """Return new totals including one more order result"""
        if result.is_error:
            return replace(self, total_deliveries=self.total_deliveries + 1)

        level = normalize_traffic_level(traffic_level)
        breakdown = dict(self.fuel_cost_breakdown)
        breakdown[level] = breakdown[level] + result.fuel_cost

        return RunTotals(
            total_profit=self.total_profit + result.profit,
            on_time_deliveries=self.on_time_deliveries + (1 if result.on_time else 0),
            total_deliveries=self.total_deliveries + 1,
            fuel_cost_breakdown=breakdown,
        )


class MetricsCalculator:
    """Calculates KPIs from the totals of a run"""

    @staticmethod
    def efficiency(on_time_deliveries: int, total_deliveries: int) -> float:
        """Percentage of deliveries on time, 2 decimals; 0 with no deliveries"""
        if total_deliveries == 0:
            return 0
        return round_half_up_to(on_time_deliveries / total_deliveries * 100, 2)

    @staticmethod
    def calculate(totals: RunTotals) -> SimulationKPIs:
        return SimulationKPIs(
            total_profit=round_half_up(totals.total_profit),
            efficiency=MetricsCalculator.efficiency(
                totals.on_time_deliveries, totals.total_deliveries
            ),
            on_time_deliveries=totals.on_time_deliveries,
            total_deliveries=totals.total_deliveries,
            fuel_cost_breakdown=dict(totals.fuel_cost_breakdown),
        )


class OrderAnalyzer:
    """Analyzes order data"""

    @staticmethod
    def analyze(orders: List[Order], routes: List[Route]) -> Dict[str, Any]:
        """Summarize orders by traffic level and value band"""
        route_map = {r.route_id: r for r in routes}
        analysis = {
            'total_orders': len(orders),
            'total_value': 0,
            'high_value_orders': [],
            'orders_by_traffic_level': {level: [] for level in TRAFFIC_LEVELS},
            'unresolved_orders': []
        }

        for order in orders:
            analysis['total_value'] += order.value_rs

            if order.is_high_value:
                analysis['high_value_orders'].append(order.order_id)

            route = route_map.get(order.assigned_route_id)
            if route is None:
                analysis['unresolved_orders'].append(order.order_id)
                continue

            level = normalize_traffic_level(route.traffic_level)
            analysis['orders_by_traffic_level'][level].append(order.order_id)

        return analysis


class DriverAnalyzer:
    """Analyzes driver workloads after a run"""

    @staticmethod
    def summarize(states: List[Any], max_hours_per_driver: float) -> List[DriverWorkload]:
        """Build one workload snapshot per driver state, in pool order"""
        capacity_minutes = max_hours_per_driver * 60
        workloads = []
        for state in states:
            utilization = state.assigned_minutes / capacity_minutes if capacity_minutes > 0 else 0
            workloads.append(DriverWorkload(
                driver_id=state.driver_id,
                name=state.name,
                fatigued=state.was_fatigued_yesterday,
                assigned_minutes=state.assigned_minutes,
                assigned_orders=list(state.assigned_orders),
                utilization=round(utilization, 4),
                exceeds_max_hours=state.assigned_minutes > capacity_minutes,
            ))
        return workloads

    @staticmethod
    def max_hours_warnings(workloads: List[DriverWorkload], max_hours_per_driver: float) -> List[str]:
        """Warnings for drivers loaded beyond max hours (the cap is not enforced)"""
        return [
            f"MAX HOURS: {w.name} assigned {w.assigned_minutes} min, "
            f"over the {max_hours_per_driver}h limit"
            for w in workloads if w.exceeds_max_hours
        ]
