# ==============================================
# Fixture Loader
# ==============================================
#
# PURPOSE:
#   Read the three fixture sources from a directory of JSON files
#   instead of the built-in rows.
#
# FILES:
# ------
# - <dir>/subjects.json             → JSON array of subject rows
# - <dir>/camera_observations.json  → JSON array of observation rows
# - <dir>/biometric_readings.json   → JSON array of biometric rows
#
# Missing files, invalid JSON and non-array content raise FixtureError.
# Row contents are checked later, by the joiner and SubjectRecord.
#
# ==============================================

import json
from pathlib import Path
from typing import Dict, List, Union

from anomaly_report.errors import FixtureError
from .fixtures import FixtureSources, Row

SOURCE_FILES: Dict[str, str] = {
    "subjects": "subjects.json",
    "camera_observations": "camera_observations.json",
    "biometric_readings": "biometric_readings.json",
}


def load_sources(directory: Union[str, Path]) -> FixtureSources:
    """
    Load the three fixture sources from JSON files.
    
    Args:
        directory: Directory holding the three source files
        
    Returns:
        FixtureSources with the rows as read
        
    Raises:
        FixtureError: the directory or a file is missing, or a file is
                      not a JSON array of objects
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FixtureError(str(directory), f"Fixture directory not found: {directory}")
    
    loaded = {
        source: _load_rows(directory / filename)
        for source, filename in SOURCE_FILES.items()
    }
    
    sources = FixtureSources(**loaded)
    counts = sources.row_counts()
    print(f"✓ Loaded fixtures from {directory} "
          f"({counts['subjects']} subjects, "
          f"{counts['camera_observations']} observations, "
          f"{counts['biometric_readings']} readings)")
    return sources


def _load_rows(path: Path) -> List[Row]:
    if not path.exists():
        raise FixtureError(str(path), f"Fixture file not found: {path}")
    
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise FixtureError(str(path), f"Invalid JSON in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise FixtureError(str(path), f"Cannot read fixture file {path}: {e}") from e
    
    if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
        raise FixtureError(str(path), f"Fixture file must hold a JSON array of objects: {path}")
    
    return data
