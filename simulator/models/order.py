"""Order model"""
from datetime import datetime
from typing import Dict, Any, Optional
from simulator.config import DEFAULT_ORDER_STATUS, HIGH_VALUE_THRESHOLD


class Order:
    """Represents a delivery order"""
    
    def __init__(self, data: Dict[str, Any]):
        self.order_id: str = str(data['order_id'])
        self.value_rs: float = float(data['value_rs'])
        self.assigned_route_id: str = str(data['assigned_route_id'])
        self.delivery_timestamp: Optional[datetime] = self._parse_timestamp(
            data.get('delivery_timestamp')
        )
        self.status: str = data.get('status') or DEFAULT_ORDER_STATUS
        self._raw_data = data
    
    @staticmethod
    def _parse_timestamp(value: Any) -> Optional[datetime]:
        if value is None or value == '':
            return None
        if isinstance(value, datetime):
            return value
        text = str(value)
        # UTC "Z" suffix, not accepted by fromisoformat before 3.11
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        return datetime.fromisoformat(text)
    
    @property
    def is_high_value(self) -> bool:
        """Check if this order qualifies for the high-value bonus"""
        return self.value_rs > HIGH_VALUE_THRESHOLD
    
    def __repr__(self) -> str:
        return f"Order({self.order_id}, Rs {self.value_rs}, {self.assigned_route_id})"
