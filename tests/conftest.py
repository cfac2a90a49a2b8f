import shutil

import pytest

from deskapps.config.logging import configure_logging
from deskapps.config.settings import LoggingSettings, StorageSettings
from deskapps.services import BookingService, GradebookService, HotelContext
from deskapps.storage import FlatFileStore
from helpers import FIXTURES_DIR, ConfirmStub, Recorder


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Keep test output free of log lines below WARNING."""
    configure_logging(LoggingSettings(level="WARNING", format="console"))


@pytest.fixture
def storage(tmp_path):
    """Storage settings pointing at an empty temporary directory."""
    return StorageSettings(data_dir=tmp_path)


@pytest.fixture
def fixture_storage(tmp_path):
    """Storage settings pointing at a copy of the fixture files."""
    for name in ("rooms.txt", "reservations.txt", "students.csv"):
        shutil.copy(FIXTURES_DIR / name, tmp_path / name)
    return StorageSettings(data_dir=tmp_path)


@pytest.fixture
def store():
    return FlatFileStore()


@pytest.fixture
def hotel_context(storage, store):
    """Fresh hotel: seed catalog, empty ledger."""
    return HotelContext.load(storage, store)


@pytest.fixture
def confirm():
    return ConfirmStub(answer=True)


@pytest.fixture
def booking_service(hotel_context, confirm):
    return BookingService(hotel_context, confirm)


@pytest.fixture
def gradebook(storage, store):
    return GradebookService.load(storage.students_path, store)


@pytest.fixture
def recorder():
    return Recorder()
