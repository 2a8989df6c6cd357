"""Delivery simulation engine"""

from simulator.simulation import simulate

__all__ = ['simulate']
