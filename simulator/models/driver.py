"""Driver model"""
from typing import List, Dict, Any, Sequence
from simulator.config import FATIGUE_HOURS_THRESHOLD


def is_fatigued(past_hours: Sequence[float]) -> bool:
    """True if the most recent day's on-duty hours exceed the fatigue threshold"""
    if not past_hours:
        return False
    return float(past_hours[-1]) > FATIGUE_HOURS_THRESHOLD


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "y")
    return bool(value)


class Driver:
    """Represents a delivery driver"""
    
    def __init__(self, data: Dict[str, Any]):
        self.name: str = data.get('name', 'Unknown')
        self.driver_id: str = str(data.get('driver_id') or data.get('email') or self.name)
        self.email: str = data.get('email', '')
        self.current_shift_hours: float = float(data.get('current_shift_hours', 0) or 0)
        self.past_7_day_hours: List[float] = [float(h) for h in data.get('past_7_day_hours', [])]
        self.is_active: bool = _as_bool(data.get('is_active', True))
        self._raw_data = data
    
    @property
    def was_fatigued_yesterday(self) -> bool:
        """Check if the driver worked past the fatigue threshold yesterday"""
        return is_fatigued(self.past_7_day_hours)
    
    def __repr__(self) -> str:
        return f"Driver({self.driver_id}, {self.name})"
