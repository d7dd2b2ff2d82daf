"""
Helpers shared by the tours tests.

Builds isolated settings and data files so tests never read or
write the development data under dev-data/.
"""

import json
from pathlib import Path
from typing import Any

from natours.core.config import Settings

SAMPLE_TOURS: list[dict[str, Any]] = [
    {"id": 1, "name": "A", "duration": 5, "price": 397},
    {"id": 3, "name": "B", "duration": 7, "price": 497},
]


def write_tours(path: Path, tours: Any) -> Path:
    path.write_text(json.dumps(tours), encoding="utf-8")
    return path


def read_tours(path: Path) -> list[dict[str, Any]]:
    return json.loads(path.read_text(encoding="utf-8"))


def make_settings(data_file: Path, **overrides: Any) -> Settings:
    """Settings for tests: isolated data file, rate limiting off."""
    values: dict[str, Any] = {
        "tours_data_file": data_file,
        "rate_limit_enabled": False,
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)
