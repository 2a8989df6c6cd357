"""Input/Output operations"""

from .loader import DataLoader
from .saver import ResultStore

__all__ = ['DataLoader', 'ResultStore']
