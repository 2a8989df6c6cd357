"""Utility functions"""
import math
import os
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP


def ensure_directory(path: str) -> None:
    """Create directory if it doesn't exist"""
    os.makedirs(path, exist_ok=True)


def format_timestamp(dt: datetime = None) -> str:
    """Format timestamp for filenames"""
    if dt is None:
        dt = datetime.now()
    return dt.strftime('%Y%m%d_%H%M%S_%f')


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up (32.5 -> 33)"""
    return int(math.floor(value + 0.5))


def round_half_up_to(value: float, digits: int) -> float:
    """
    Round to a number of decimals, halves rounding away from zero (3.125 -> 3.13).
    Works on the exact binary value of the float, so 1.005 (stored as 1.00499...) -> 1.0
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
