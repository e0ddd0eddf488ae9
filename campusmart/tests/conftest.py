import os
import sys
from pathlib import Path

import pytest

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from campusmart.db import StorageEngine, reset_engine  # noqa: E402
from campusmart.domain.models import Account, ItemCondition, Listing, ListingCategory  # noqa: E402


@pytest.fixture()
def engine():
    # isolated in-memory store per test
    eng = StorageEngine(":memory:")
    yield eng
    eng.close()


@pytest.fixture()
def db_file(tmp_path):
    return str(tmp_path / "campusmart_test.db")


@pytest.fixture()
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("CAMPUSMART_DB_PATH", str(tmp_path / "api_test.db"))
    reset_engine()
    from fastapi.testclient import TestClient
    from campusmart.api import app
    with TestClient(app) as c:
        yield c
    reset_engine()


@pytest.fixture()
def new_account():
    return _make_account


@pytest.fixture()
def new_listing():
    return _make_listing


def _make_account(email="ana@uta.edu", first="Ana", last="Lopez", credential="pw1"):
    return Account(first=first, last=last, email=email, credential=credential)


def _make_listing(seller_id, title="Calculus book", created_at=100, **kw):
    kw.setdefault("description", "Barely used")
    kw.setdefault("category", ListingCategory.ENGINEERING)
    kw.setdefault("price_cents", 2500)
    kw.setdefault("condition", ItemCondition.GOOD)
    kw.setdefault("photos", ["content://img/1", "content://img/2"])
    return Listing(seller_id=seller_id, title=title, created_at=created_at, **kw)


@pytest.fixture(autouse=True)
def _no_ambient_db(monkeypatch):
    # Never let a test fall through to a real project-root database
    if "CAMPUSMART_DB_PATH" not in os.environ:
        monkeypatch.setenv("CAMPUSMART_DB_PATH", ":memory:")
    yield
    reset_engine()
