"""Least-loaded driver selection"""
import heapq
from typing import List, Tuple

from simulator.exceptions import EngineInputError
from simulator.models import Driver


class DriverState:
    """Per-run workload of one driver. Owned by a single DriverPool."""
    
    def __init__(self, driver: Driver, index: int):
        self.driver_id = driver.driver_id
        self.name = driver.name
        self.index = index
        # Fixed for the whole run; today's load does not change it
        self.was_fatigued_yesterday = driver.was_fatigued_yesterday
        self.assigned_minutes = 0
        self.assigned_orders: List[str] = []
    
    def __repr__(self) -> str:
        return f"DriverState({self.name}, {self.assigned_minutes} min, {len(self.assigned_orders)} orders)"


class DriverPool:
    """
    Pool of the first ``number_of_drivers`` drivers, handing out the
    least-loaded driver for each order.
    
    Backed by a heap keyed on (assigned_minutes, original index), so ties
    always go to the driver that appears first in the input.
    """
    
    def __init__(self, drivers: List[Driver], number_of_drivers: int):
        selected = list(drivers)[:max(number_of_drivers, 0)]
        if not selected:
            raise EngineInputError("No drivers available for simulation")
        
        self.states: List[DriverState] = [
            DriverState(driver, index) for index, driver in enumerate(selected)
        ]
        self._heap: List[Tuple[int, int]] = [(0, state.index) for state in self.states]
        heapq.heapify(self._heap)
    
    def __len__(self) -> int:
        return len(self.states)
    
    def pick(self) -> DriverState:
        """
        Take the driver with the smallest assigned minutes out of the queue.
        The caller must hand it back through ``assign``.
        """
        _, index = heapq.heappop(self._heap)
        return self.states[index]
    
    def assign(self, state: DriverState, order_id: str, minutes: int) -> None:
        """Add an order's minutes to a picked driver and requeue it"""
        state.assigned_minutes += minutes
        state.assigned_orders.append(order_id)
        heapq.heappush(self._heap, (state.assigned_minutes, state.index))
