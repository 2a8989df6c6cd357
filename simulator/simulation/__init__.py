"""Simulation logic"""

from .engine import SimulationEngine, simulate
from .balancer import DriverPool, DriverState
from .calculator import OrderCalculator
from .supply import select_active_drivers
from .traffic import traffic_time_multiplier
from .validator import ParameterValidator, InputValidator

__all__ = [
    'SimulationEngine', 'simulate', 'DriverPool', 'DriverState', 'OrderCalculator',
    'select_active_drivers', 'traffic_time_multiplier', 'ParameterValidator', 'InputValidator'
]
