"""Tests for KPI aggregation and analysis."""

from simulator.analysis import RunTotals, MetricsCalculator, OrderAnalyzer, DriverAnalyzer
from simulator.models import OrderResult
from simulator.simulation.balancer import DriverState
from simulator.utils import round_half_up_to

from tests.conftest import make_driver, make_route, make_order


def _result(order_id, profit, on_time=True, fuel=50.0):
    return OrderResult(order_id=order_id, route_id="R1", value_rs=800,
                       time_to_deliver_minutes=30, on_time=on_time,
                       fuel_cost=fuel, profit=profit, assigned_driver="A")


class TestRunTotals:
    def test_record_returns_new_totals(self):
        empty = RunTotals()
        totals = empty.record(_result("O1", 750), "Low")

        assert empty.total_deliveries == 0
        assert empty.fuel_cost_breakdown == {"Low": 0, "Medium": 0, "High": 0}
        assert totals.total_deliveries == 1
        assert totals.on_time_deliveries == 1
        assert totals.total_profit == 750
        assert totals.fuel_cost_breakdown["Low"] == 50

    def test_error_entry_only_counts_delivery(self):
        totals = RunTotals().record(OrderResult.route_missing("O1"))
        assert totals.total_deliveries == 1
        assert totals.on_time_deliveries == 0
        assert totals.total_profit == 0

    def test_unknown_level_goes_to_low_bucket(self):
        totals = RunTotals().record(_result("O1", 750), "Jammed")
        assert set(totals.fuel_cost_breakdown) == {"Low", "Medium", "High"}
        assert totals.fuel_cost_breakdown["Low"] == 50


class TestMetricsCalculator:
    def test_efficiency(self):
        assert MetricsCalculator.efficiency(1, 3) == 33.33
        assert MetricsCalculator.efficiency(3, 3) == 100.0
        assert MetricsCalculator.efficiency(0, 0) == 0

    def test_efficiency_ties_round_up(self):
        # 1/32 = 3.125%
        assert MetricsCalculator.efficiency(1, 32) == 3.13
        assert MetricsCalculator.efficiency(3, 8) == 37.5

    def test_round_half_up_to_uses_stored_value(self):
        assert round_half_up_to(2.675, 2) == 2.67
        assert round_half_up_to(0.125, 2) == 0.13

    def test_calculate(self):
        totals = RunTotals()
        totals = totals.record(_result("O1", 700.4), "Low")
        totals = totals.record(_result("O2", -20.0, on_time=False, fuel=70.0), "High")
        kpis = MetricsCalculator.calculate(totals)

        assert kpis.total_profit == 680
        assert kpis.efficiency == 50.0
        assert kpis.on_time_deliveries == 1
        assert kpis.total_deliveries == 2
        assert kpis.fuel_cost_breakdown == {"Low": 50.0, "Medium": 0, "High": 70.0}


class TestOrderAnalyzer:
    def test_analyze(self):
        routes = [make_route("R1", traffic_level="Low"), make_route("R2", traffic_level="High")]
        orders = [make_order("O1", 1500, "R1"), make_order("O2", 500, "R2"),
                  make_order("O3", 900, "R9")]
        analysis = OrderAnalyzer.analyze(orders, routes)

        assert analysis["total_orders"] == 3
        assert analysis["total_value"] == 2900
        assert analysis["high_value_orders"] == ["O1"]
        assert analysis["orders_by_traffic_level"]["Low"] == ["O1"]
        assert analysis["orders_by_traffic_level"]["High"] == ["O2"]
        assert analysis["unresolved_orders"] == ["O3"]


class TestDriverAnalyzer:
    def test_summarize_and_warn(self):
        busy = DriverState(make_driver(name="Busy"), 0)
        busy.assigned_minutes = 500
        busy.assigned_orders = ["O1", "O2"]
        idle = DriverState(make_driver(name="Idle", past_hours=(9,)), 1)

        workloads = DriverAnalyzer.summarize([busy, idle], max_hours_per_driver=8)

        assert workloads[0].utilization == round(500 / 480, 4)
        assert workloads[0].exceeds_max_hours is True
        assert workloads[1].fatigued is True
        assert workloads[1].exceeds_max_hours is False

        warnings = DriverAnalyzer.max_hours_warnings(workloads, 8)
        assert len(warnings) == 1
        assert "Busy" in warnings[0]
