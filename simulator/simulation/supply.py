"""Driver supply for simulation runs"""
from typing import List
from simulator.models import Driver


def select_active_drivers(drivers: List[Driver], limit: int) -> List[Driver]:
    """Active drivers in input order, at most ``limit`` of them"""
    active = [d for d in drivers if d.is_active]
    return active[:max(limit, 0)]
