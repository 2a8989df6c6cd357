"""Analysis functionality"""

from .analyzer import RunTotals, MetricsCalculator, OrderAnalyzer, DriverAnalyzer

__all__ = ['RunTotals', 'MetricsCalculator', 'OrderAnalyzer', 'DriverAnalyzer']
