"""Main simulation engine"""
import math
from typing import List, Dict

from simulator.analysis import RunTotals, MetricsCalculator, DriverAnalyzer
from simulator.models import Driver, Route, Order, RunParameters, OrderResult, SimulationResult
from simulator.simulation.balancer import DriverPool
from simulator.simulation.calculator import OrderCalculator


class SimulationEngine:
    """
    Assigns orders to drivers and aggregates KPIs.

    One run:
      1. sort orders by value, highest first
      2. for each order resolve its route, pick the least-loaded driver,
         compute time / penalty / bonus / fuel / profit
      3. charge the driver the delivery time rounded up
      4. fold the order into the running totals

    Holds no state between runs; each call to ``run`` builds a fresh
    driver pool.
    """

    def __init__(self, drivers: List[Driver], routes: List[Route], orders: List[Order]):
        self.drivers = list(drivers)
        self.routes = list(routes)
        self.orders = list(orders)
        self.route_map: Dict[str, Route] = {r.route_id: r for r in self.routes}

    def sorted_orders(self) -> List[Order]:
        """Orders in dispatch order: value descending, ties keep input order"""
        return sorted(self.orders, key=lambda o: o.value_rs, reverse=True)

    def run(self, params: RunParameters) -> SimulationResult:
        pool = DriverPool(self.drivers, params.number_of_drivers)

        per_order: List[OrderResult] = []
        totals = RunTotals()

        for order in self.sorted_orders():
            route = self.route_map.get(order.assigned_route_id)
            if route is None:
                result = OrderResult.route_missing(order.order_id)
                per_order.append(result)
                totals = totals.record(result)
                continue

            driver = pool.pick()
            result, time_to_deliver = OrderCalculator.calculate(order, route, driver)
            pool.assign(driver, order.order_id, math.ceil(time_to_deliver))

            per_order.append(result)
            totals = totals.record(result, route.traffic_level)

        workloads = DriverAnalyzer.summarize(pool.states, params.max_hours_per_driver)

        return SimulationResult(
            inputs=params,
            kpis=MetricsCalculator.calculate(totals),
            per_order=per_order,
            drivers=workloads,
            warnings=DriverAnalyzer.max_hours_warnings(workloads, params.max_hours_per_driver),
        )


def simulate(drivers: List[Driver], routes: List[Route], orders: List[Order],
             params: RunParameters) -> SimulationResult:
    """
    Run one simulation.
    Raises EngineInputError when no drivers remain after taking the first
    ``params.number_of_drivers``.
    """
    return SimulationEngine(drivers, routes, orders).run(params)
