import os
import sys

import pytest
from bs4 import BeautifulSoup

# Ensure repo root is on sys.path so "portfolio_site" imports work without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))


class FakeStore:
    """In-memory stand-in for ContactStore."""

    def __init__(self):
        self.saved = []
        self.fail = None

    def save(self, record):
        if self.fail:
            raise self.fail
        record.id = len(self.saved) + 1
        self.saved.append(record)
        return record

    def latest(self, limit=50):
        if self.fail:
            raise self.fail
        rows = sorted(self.saved, key=lambda r: (r.created_at, r.id), reverse=True)
        return rows[:limit]


class FakeMailer:
    def __init__(self):
        self.sent = []
        self.fail = None

    def send_contact(self, record):
        if self.fail:
            raise self.fail
        self.sent.append(record)


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def app(store, mailer):
    from portfolio_site.api import create_app

    cfg = {
        "TESTING": True,
        "STORE": store,
        "MAILER": mailer,
        # no real DB is touched; DATABASE_URL is only read when STORE is absent
        "DATABASE_URL": None,
    }
    return create_app(cfg)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def site():
    from portfolio_site.site import create_site

    return create_site({"TESTING": True, "API_URL": "http://api.test", "BACKDROP_FRAMES": 2})


@pytest.fixture
def site_client(site):
    return site.test_client()


@pytest.fixture
def soup():
    def _s(html: bytes | str):
        return BeautifulSoup(html, "lxml")
    return _s


@pytest.fixture
def valid_contact():
    return {
        "name": "Al",
        "email": "al@mail.com",
        "subject": "Hello",
        "message": "0123456789",
    }
