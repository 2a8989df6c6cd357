"""Route model"""
from typing import Dict, Any


class Route:
    """Represents a delivery route"""
    
    def __init__(self, data: Dict[str, Any]):
        self.route_id: str = str(data['route_id'])
        self.distance_km: float = float(data['distance_km'])
        self.traffic_level: str = data.get('traffic_level', 'Low')
        self.base_time_minutes: float = float(data['base_time_minutes'])
        self._raw_data = data
    
    def __repr__(self) -> str:
        return f"Route({self.route_id}, {self.distance_km}km, {self.traffic_level})"
