"""Simulator exceptions"""


class SimulatorError(Exception):
    """Base class for simulator errors"""


class EngineInputError(SimulatorError, ValueError):
    """Input that a simulation cannot run on (e.g. an empty driver pool)"""


class DataLoadError(SimulatorError):
    """Raised when an input data file is missing or malformed"""


class ResultNotFoundError(SimulatorError, LookupError):
    """Raised when no stored simulation result exists"""
