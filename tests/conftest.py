"""
Shared fixtures for the tours test suite.

Every test gets its own data file under tmp_path and its own
application instance.
"""

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from natours.infrastructure.tours.json_file_repository import JsonFileTourRepository
from natours.main import create_app
from tests.support import SAMPLE_TOURS, make_settings, write_tours


@pytest.fixture
def tours_file(tmp_path: Path) -> Path:
    """A data file holding two tours with a gap in their ids."""
    return write_tours(tmp_path / "tours.json", SAMPLE_TOURS)


@pytest.fixture
def repository(tours_file: Path) -> JsonFileTourRepository:
    """A repository already loaded from ``tours_file``."""
    repo = JsonFileTourRepository(tours_file)
    repo.load_all()
    return repo


@pytest.fixture
def client(tours_file: Path) -> Iterator[TestClient]:
    """A test client whose app has finished startup."""
    app = create_app(make_settings(tours_file))
    with TestClient(app) as test_client:
        yield test_client
