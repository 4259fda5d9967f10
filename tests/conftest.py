# tests/conftest.py
# Fixtures partagées : horloge fixe, stockage temporaire, service et client HTTP.

import datetime as dt
import os
import tempfile

# Logs et fichier de données isolés avant tout import du package
_TEST_ROOT = tempfile.mkdtemp(prefix="daily-challenges-tests-")
os.environ.setdefault("LOGS_DIR", os.path.join(_TEST_ROOT, "logs"))
os.environ.setdefault("DATA_FILE", os.path.join(_TEST_ROOT, "challenges.json"))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from daily_challenges.api.dependencies import get_challenge_service, get_challenge_store  # noqa: E402
from daily_challenges.main import app  # noqa: E402
from daily_challenges.services.challenge_store import JsonChallengeStore  # noqa: E402
from daily_challenges.services.challenges import ChallengeService  # noqa: E402

START_DAY = dt.date(2026, 10, 19)


class FixedClock:
    """Horloge de test avancée manuellement."""

    def __init__(self, day: dt.date = START_DAY):
        self.day = day

    def today(self) -> dt.date:
        return self.day

    def advance(self, days: int = 1) -> None:
        self.day += dt.timedelta(days=days)


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "challenges.json"


@pytest.fixture
def store(data_file):
    return JsonChallengeStore(data_file)


@pytest.fixture
def service(store, clock):
    return ChallengeService(store, clock)


# ---- TestClient sur un service isolé (dependency override) ----
@pytest.fixture
def client(service, store):
    app.dependency_overrides[get_challenge_service] = lambda: service
    app.dependency_overrides[get_challenge_store] = lambda: store
    c = TestClient(app)
    yield c
    app.dependency_overrides.clear()
