"""Data models for drivers, routes, orders and simulation results"""

from .driver import Driver, is_fatigued
from .route import Route
from .order import Order
from .result import RunParameters, OrderResult, SimulationKPIs, DriverWorkload, SimulationResult

__all__ = [
    'Driver', 'is_fatigued', 'Route', 'Order',
    'RunParameters', 'OrderResult', 'SimulationKPIs', 'DriverWorkload', 'SimulationResult'
]
