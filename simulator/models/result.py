"""Simulation run parameters and result records"""
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from simulator.config import ROUTE_MISSING_ERROR


@dataclass(frozen=True)
class RunParameters:
    """Parameters for a single simulation run.

    ``route_start_time`` is passed through untouched. ``max_hours_per_driver``
    is validated and echoed but does not cap assignment.
    """

    number_of_drivers: int
    route_start_time: str
    max_hours_per_driver: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RunParameters':
        return cls(
            number_of_drivers=data['number_of_drivers'],
            route_start_time=data['route_start_time'],
            max_hours_per_driver=data['max_hours_per_driver'],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'number_of_drivers': self.number_of_drivers,
            'route_start_time': self.route_start_time,
            'max_hours_per_driver': self.max_hours_per_driver
        }


@dataclass(frozen=True)
class OrderResult:
    """Outcome of processing one order.

    A result with ``error`` set is a route resolution gap: only
    ``order_id`` is meaningful and no driver was assigned.
    """

    order_id: str
    route_id: Optional[str] = None
    value_rs: Optional[float] = None
    time_to_deliver_minutes: Optional[int] = None
    on_time: Optional[bool] = None
    penalty: float = 0
    bonus: float = 0
    fuel_cost: float = 0
    profit: float = 0
    assigned_driver: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def route_missing(cls, order_id: str) -> 'OrderResult':
        return cls(order_id=order_id, error=ROUTE_MISSING_ERROR)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, Any]:
        if self.is_error:
            return {'order_id': self.order_id, 'error': self.error}
        return {
            'order_id': self.order_id,
            'route_id': self.route_id,
            'value_rs': self.value_rs,
            'time_to_deliver_minutes': self.time_to_deliver_minutes,
            'on_time': self.on_time,
            'penalty': self.penalty,
            'bonus': self.bonus,
            'fuel_cost': self.fuel_cost,
            'profit': self.profit,
            'assigned_driver': self.assigned_driver
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OrderResult':
        if data.get('error'):
            return cls(order_id=data['order_id'], error=data['error'])
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})


@dataclass(frozen=True)
class SimulationKPIs:
    """Aggregate KPIs of one run"""

    total_profit: int
    efficiency: float
    on_time_deliveries: int
    total_deliveries: int
    fuel_cost_breakdown: Dict[str, float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total_profit': self.total_profit,
            'efficiency': self.efficiency,
            'on_time_deliveries': self.on_time_deliveries,
            'total_deliveries': self.total_deliveries,
            'fuel_cost_breakdown': dict(self.fuel_cost_breakdown)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SimulationKPIs':
        return cls(
            total_profit=data['total_profit'],
            efficiency=data['efficiency'],
            on_time_deliveries=data['on_time_deliveries'],
            total_deliveries=data['total_deliveries'],
            fuel_cost_breakdown=dict(data['fuel_cost_breakdown']),
        )


@dataclass(frozen=True)
class DriverWorkload:
    """Snapshot of one driver's load at the end of a run"""

    driver_id: str
    name: str
    fatigued: bool
    assigned_minutes: int
    assigned_orders: List[str]
    utilization: float          # assigned minutes / (max hours * 60)
    exceeds_max_hours: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            'driver_id': self.driver_id,
            'name': self.name,
            'fatigued': self.fatigued,
            'assigned_minutes': self.assigned_minutes,
            'assigned_orders': list(self.assigned_orders),
            'utilization': self.utilization,
            'exceeds_max_hours': self.exceeds_max_hours
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DriverWorkload':
        return cls(**{k: data[k] for k in cls.__dataclass_fields__})


@dataclass(frozen=True)
class SimulationResult:
    """Everything one engine invocation produces"""

    inputs: RunParameters
    kpis: SimulationKPIs
    per_order: List[OrderResult]
    drivers: List[DriverWorkload] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    created_at: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'inputs': self.inputs.to_dict(),
            'kpis': self.kpis.to_dict(),
            'per_order': [r.to_dict() for r in self.per_order],
            'drivers': [d.to_dict() for d in self.drivers],
            'warnings': list(self.warnings)
        }
        if self.created_at is not None:
            data['created_at'] = self.created_at
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SimulationResult':
        return cls(
            inputs=RunParameters.from_dict(data['inputs']),
            kpis=SimulationKPIs.from_dict(data['kpis']),
            per_order=[OrderResult.from_dict(r) for r in data.get('per_order', [])],
            drivers=[DriverWorkload.from_dict(d) for d in data.get('drivers', [])],
            warnings=list(data.get('warnings', [])),
            created_at=data.get('created_at'),
        )
