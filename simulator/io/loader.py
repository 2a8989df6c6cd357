"""Data loading functionality"""
import json
import os
from datetime import datetime, date
from typing import List, Tuple, Dict, Any, Optional

import pandas as pd

from simulator.exceptions import DataLoadError
from simulator.models import Driver, Route, Order
from simulator.utils import ensure_directory


DRIVERS_FILENAME = 'drivers.csv'
ROUTES_FILENAME = 'routes.csv'
ORDERS_FILENAME = 'orders.csv'

SAMPLE_DRIVERS_CSV = (
    "name,shift_hours,past_week_hours,email,is_active\n"
    "Rahul Singh,2,7|8|6|7|8|6,rahul@example.com,true\n"
    "Priya Patel,3,8|7|9|8|7|6,priya@example.com,true\n"
    "Amit Kumar,1,6|7|9|8|6|7,amit@example.com,true\n"
    "Sneha Gupta,0,5|6|7|6|5|4,sneha@example.com,true\n"
    "Vikram Sharma,4,8|9|8|7|8|9,vikram@example.com,true\n"
)

SAMPLE_ROUTES_CSV = (
    "route_id,distance_km,traffic_level,base_time_min\n"
    "R001,10,Low,30\n"
    "R002,15,Medium,45\n"
    "R003,20,High,60\n"
    "R004,12,Low,35\n"
    "R005,18,Medium,50\n"
)

SAMPLE_ORDERS_CSV = (
    "order_id,value_rs,route_id,delivery_time,status\n"
    "O001,800,R001,,Pending\n"
    "O002,1200,R002,,Pending\n"
    "O003,950,R003,,Pending\n"
    "O004,1500,R004,,Pending\n"
    "O005,750,R005,,Pending\n"
    "O006,1100,R001,,Pending\n"
    "O007,900,R002,,Pending\n"
)


class DataLoader:
    """Handles loading of driver, route and order data from JSON or CSV files"""

    @staticmethod
    def load_json(filepath: str) -> List[dict]:
        """Load JSON file"""
        try:
            with open(filepath, 'r') as f:
                return json.load(f)
        except FileNotFoundError:
            raise DataLoadError(f"File not found: {filepath}")
        except json.JSONDecodeError as e:
            raise DataLoadError(f"Invalid JSON in {filepath}: {e}")

    @staticmethod
    def load_csv(filepath: str) -> List[dict]:
        """Load CSV file as a list of row dicts with string values"""
        try:
            df = pd.read_csv(filepath, dtype=str, keep_default_na=False, skipinitialspace=True)
        except FileNotFoundError:
            raise DataLoadError(f"File not found: {filepath}")
        except pd.errors.ParserError as e:
            raise DataLoadError(f"Invalid CSV in {filepath}: {e}")
        except pd.errors.EmptyDataError:
            return []
        return df.to_dict(orient='records')

    @staticmethod
    def load_records(filepath: str) -> Tuple[List[dict], bool]:
        """Load records and report whether they came from a CSV file"""
        if filepath.lower().endswith('.csv'):
            return DataLoader.load_csv(filepath), True
        return DataLoader.load_json(filepath), False

    @staticmethod
    def load_drivers(filepath: str) -> List[Driver]:
        records, is_csv = DataLoader.load_records(filepath)
        convert = DataLoader._driver_from_csv if is_csv else None
        return DataLoader._build(Driver, records, filepath, convert)

    @staticmethod
    def load_routes(filepath: str) -> List[Route]:
        records, is_csv = DataLoader.load_records(filepath)
        convert = DataLoader._route_from_csv if is_csv else None
        return DataLoader._build(Route, records, filepath, convert)

    @staticmethod
    def load_orders(filepath: str, today: Optional[date] = None) -> List[Order]:
        records, is_csv = DataLoader.load_records(filepath)
        convert = (lambda row: DataLoader._order_from_csv(row, today)) if is_csv else None
        return DataLoader._build(Order, records, filepath, convert)

    @staticmethod
    def load_dataset(data_dir: str) -> Tuple[List[Driver], List[Route], List[Order]]:
        """Load drivers.csv, routes.csv and orders.csv from a data directory"""
        drivers = DataLoader.load_drivers(os.path.join(data_dir, DRIVERS_FILENAME))
        routes = DataLoader.load_routes(os.path.join(data_dir, ROUTES_FILENAME))
        orders = DataLoader.load_orders(os.path.join(data_dir, ORDERS_FILENAME))

        print(f"Loaded {len(drivers)} drivers, {len(routes)} routes and {len(orders)} orders")

        return drivers, routes, orders

    @staticmethod
    def write_sample_data(data_dir: str) -> List[str]:
        """Write sample CSV files that don't exist yet. Returns the paths written."""
        ensure_directory(data_dir)
        written = []
        samples = {
            DRIVERS_FILENAME: SAMPLE_DRIVERS_CSV,
            ROUTES_FILENAME: SAMPLE_ROUTES_CSV,
            ORDERS_FILENAME: SAMPLE_ORDERS_CSV
        }
        for filename, content in samples.items():
            path = os.path.join(data_dir, filename)
            if os.path.exists(path):
                continue
            print(f"Creating sample {filename}...")
            with open(path, 'w') as f:
                f.write(content)
            written.append(path)
        return written

    @staticmethod
    def _build(model, records: List[dict], filepath: str, convert=None) -> list:
        try:
            if convert is not None:
                records = [convert(record) for record in records]
            return [model(record) for record in records]
        except (KeyError, ValueError, TypeError) as e:
            raise DataLoadError(f"Malformed record in {filepath}: {e!r}")

    @staticmethod
    def _driver_from_csv(row: Dict[str, Any]) -> Dict[str, Any]:
        hours = [h for h in row.get('past_week_hours', '').split('|') if h.strip()]
        return {
            'name': row['name'],
            'email': row.get('email', ''),
            'current_shift_hours': row.get('shift_hours') or 0,
            'past_7_day_hours': [float(h) for h in hours],
            'is_active': row.get('is_active') or True
        }

    @staticmethod
    def _route_from_csv(row: Dict[str, Any]) -> Dict[str, Any]:
        return {
            'route_id': row['route_id'],
            'distance_km': row['distance_km'],
            'traffic_level': row['traffic_level'],
            'base_time_minutes': row['base_time_min']
        }

    @staticmethod
    def _order_from_csv(row: Dict[str, Any], today: Optional[date] = None) -> Dict[str, Any]:
        delivery_timestamp = None
        delivery_time = row.get('delivery_time', '')
        if delivery_time:
            # "HH:MM" placed on today's date
            hours, minutes = (int(part) for part in delivery_time.split(':')[:2])
            day = today or date.today()
            delivery_timestamp = datetime(day.year, day.month, day.day, hours, minutes)
        return {
            'order_id': row['order_id'],
            'value_rs': row['value_rs'],
            'assigned_route_id': row['route_id'],
            'delivery_timestamp': delivery_timestamp,
            'status': row.get('status') or 'Pending'
        }
