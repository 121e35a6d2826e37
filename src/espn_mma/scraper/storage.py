"""Data storage utilities for the JSON output file."""

import json
from pathlib import Path
from typing import Optional

from ..extraction.models import FighterStats

# Default data directory (relative to the working directory)
DEFAULT_DATA_DIR = Path("data")

FIGHTERS_FILE = "fighters.json"


class FighterStorage:
    """Handles reading/writing aggregated fighters to a JSON file."""

    def __init__(self, data_dir: Optional[Path] = None):
        """Initialize storage with data directory."""
        self.data_dir = Path(data_dir) if data_dir else DEFAULT_DATA_DIR
        self.fighters_file = self.data_dir / FIGHTERS_FILE

    def save_fighters(self, fighters: list[FighterStats]) -> Path:
        """Write all fighters as a JSON array, replacing any previous file."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        with open(self.fighters_file, "w") as f:
            json.dump([fighter.to_dict() for fighter in fighters], f, indent=2)
        return self.fighters_file

    def load_fighters(self) -> list[FighterStats]:
        """Load fighters from the JSON file; missing file means none."""
        if not self.fighters_file.exists():
            return []
        with open(self.fighters_file) as f:
            data = json.load(f)
        return [FighterStats.from_dict(item) for item in data]

    def get_stats(self) -> dict:
        """Get counts of stored data."""
        fighters = self.load_fighters()
        return {
            "fighters": len(fighters),
            "fights": sum(len(f.fights) for f in fighters),
            "striking_rows": sum(len(f.striking_stats) for f in fighters),
            "clinch_rows": sum(len(f.clinch_stats) for f in fighters),
            "ground_rows": sum(len(f.ground_stats) for f in fighters),
        }
