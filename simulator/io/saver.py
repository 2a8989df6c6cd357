"""Simulation result storage"""
import glob
import json
import os
from datetime import datetime
from typing import List, Optional

from simulator.config import RESULTS_DIR, RECENT_RESULTS_LIMIT
from simulator.exceptions import DataLoadError, ResultNotFoundError
from simulator.models import SimulationResult
from simulator.utils import ensure_directory, format_timestamp


class ResultStore:
    """Stores simulation results as JSON files, one per run, keyed by creation time"""
    
    def __init__(self, results_dir: str = RESULTS_DIR):
        self.results_dir = results_dir
        ensure_directory(self.results_dir)
    
    def save(self, result: SimulationResult, created_at: Optional[datetime] = None) -> str:
        """Stamp the result with its creation time and save it. Returns the file path."""
        created_at = created_at or datetime.now()
        document = result.to_dict()
        document['created_at'] = created_at.isoformat()
        
        filename = f'simulation_{format_timestamp(created_at)}.json'
        filepath = os.path.join(self.results_dir, filename)
        
        with open(filepath, 'w') as f:
            json.dump(document, f, indent=2)
        
        print(f"💾 Saved simulation result to {filename}")
        return filepath
    
    def recent(self, limit: int = RECENT_RESULTS_LIMIT) -> List[SimulationResult]:
        """Most recent results, newest first. Raises DataLoadError on an unreadable file."""
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        
        results = [
            self._load(filepath)
            for filepath in glob.glob(os.path.join(self.results_dir, 'simulation_*.json'))
        ]
        results.sort(key=lambda r: r.created_at or '', reverse=True)
        return results[:limit]
    
    @staticmethod
    def _load(filepath: str) -> SimulationResult:
        try:
            with open(filepath, 'r') as f:
                return SimulationResult.from_dict(json.load(f))
        except json.JSONDecodeError as e:
            raise DataLoadError(f"Invalid JSON in {filepath}: {e}")
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise DataLoadError(f"Malformed simulation result in {filepath}: {e!r}")
    
    def latest(self) -> SimulationResult:
        """Most recent result; raises ResultNotFoundError if nothing is stored"""
        results = self.recent(limit=1)
        if not results:
            raise ResultNotFoundError("No simulations found")
        return results[0]
