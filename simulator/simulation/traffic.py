"""Traffic level lookups"""
from simulator.config import (
    TRAFFIC_TIME_MULTIPLIERS, DEFAULT_TRAFFIC_LEVEL,
    BASE_FUEL_COST_PER_KM, HIGH_TRAFFIC_SURCHARGE_PER_KM
)


def normalize_traffic_level(level: str) -> str:
    """Map a traffic level onto a known level; anything unrecognized counts as Low"""
    return level if level in TRAFFIC_TIME_MULTIPLIERS else DEFAULT_TRAFFIC_LEVEL


def traffic_time_multiplier(level: str) -> float:
    """Extra fraction of base time added by traffic (High 0.25, Medium 0.10, else 0)"""
    return TRAFFIC_TIME_MULTIPLIERS[normalize_traffic_level(level)]


def fuel_cost_per_km(level: str) -> float:
    """Fuel cost per km, with a surcharge on High traffic routes"""
    surcharge = HIGH_TRAFFIC_SURCHARGE_PER_KM if level == 'High' else 0
    return BASE_FUEL_COST_PER_KM + surcharge
