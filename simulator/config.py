"""Configuration settings for the simulator"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# File paths
DATA_DIR = os.getenv('SIMULATOR_DATA_DIR', './data')
RESULTS_DIR = os.getenv('SIMULATOR_RESULTS_DIR', os.path.join(DATA_DIR, 'simulations'))

# Run defaults
DEFAULT_NUMBER_OF_DRIVERS = int(os.getenv('DEFAULT_NUMBER_OF_DRIVERS', '3'))
DEFAULT_ROUTE_START_TIME = os.getenv('DEFAULT_ROUTE_START_TIME', '09:00')
DEFAULT_MAX_HOURS_PER_DRIVER = float(os.getenv('DEFAULT_MAX_HOURS_PER_DRIVER', '8'))
RECENT_RESULTS_LIMIT = 10

# Fatigue
FATIGUE_HOURS_THRESHOLD = 8.0
FATIGUE_TIME_MULTIPLIER = 1.3

# Traffic time multipliers (extra fraction of base time)
TRAFFIC_LEVELS = ('Low', 'Medium', 'High')
TRAFFIC_TIME_MULTIPLIERS = {
    'High': 0.25,
    'Medium': 0.10,
    'Low': 0.0
}
DEFAULT_TRAFFIC_LEVEL = 'Low'

# Penalty and bonus rules (Rs)
LATE_GRACE_MINUTES = 10
LATE_PENALTY = 50
HIGH_VALUE_THRESHOLD = 1000
HIGH_VALUE_BONUS_RATE = 0.10

# Fuel cost per km (Rs)
BASE_FUEL_COST_PER_KM = 5
HIGH_TRAFFIC_SURCHARGE_PER_KM = 2

# Order statuses
ORDER_STATUSES = ('Pending', 'Delivered')
DEFAULT_ORDER_STATUS = 'Pending'

ROUTE_MISSING_ERROR = 'route missing'
