from pathlib import Path
import os
import sys
import threading

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# Safety default for the module-level app created on import.
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")

from votecount import create_app


class InMemoryHashStore:
    """Stands in for redis: one dict of fields per key, guarded by a lock."""

    def __init__(self):
        self.hashes = {}
        self.calls = []
        self._lock = threading.Lock()

    def hmget(self, key, fields):
        self.calls.append(("hmget", key))
        with self._lock:
            record = self.hashes.get(key, {})
            return [record.get(field) for field in fields]

    def hincrby(self, key, field, amount=1):
        self.calls.append(("hincrby", key, field))
        with self._lock:
            record = self.hashes.setdefault(key, {})
            value = int(record.get(field, "0")) + amount
            record[field] = str(value)
            return value

    def ping(self):
        return True


@pytest.fixture()
def store():
    return InMemoryHashStore()


@pytest.fixture()
def app(store):
    return create_app(
        {
            "TESTING": True,
            "CORS_ALLOW_ORIGIN": "https://polls.example.com",
        },
        store=store,
    )


@pytest.fixture()
def client(app):
    return app.test_client()
