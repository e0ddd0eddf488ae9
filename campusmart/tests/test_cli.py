import os

from campusmart import schema
from campusmart.cli import main
from campusmart.db import StorageEngine
from campusmart.domain.models import Role
from campusmart.services import account_svc


def test_init_and_stats(db_file, capsys):
    assert main(["--db", db_file, "init"]) == 0
    assert f"schema v{schema.SCHEMA_VERSION}" in capsys.readouterr().out
    assert main(["--db", db_file, "stats"]) == 0
    out = capsys.readouterr().out
    assert "'accounts': 0" in out and "'listings': 0" in out


def test_create_admin(db_file):
    assert main(["--db", db_file, "create-admin", "--first", "Root", "--last", "Admin",
                 "--email", "Root@MavMart.com", "--credential", "pw"]) == 0
    assert main(["--db", db_file, "create-admin", "--first", "Root", "--last", "Admin",
                 "--email", "root@mavmart.com", "--credential", "pw"]) == 1
    assert main(["--db", db_file, "create-admin", "--first", "X", "--last", "Y",
                 "--email", "x@uta.edu", "--credential", "pw"]) == 2

    eng = StorageEngine(db_file)
    try:
        acc = account_svc.validate_login("root@mavmart.com", "pw", expected_role=Role.ADMINISTRATOR, engine=eng)
        assert acc is not None
    finally:
        eng.close()


def test_reset_requires_confirmation(db_file, new_account):
    eng = StorageEngine(db_file)
    account_svc.insert_account(new_account(), eng)
    eng.close()

    assert main(["--db", db_file, "reset"]) == 2
    assert main(["--db", db_file, "reset", "--yes"]) == 0

    eng = StorageEngine(db_file)
    try:
        assert account_svc.get_all_accounts(eng) == []
    finally:
        eng.close()


def test_serve_runs_uvicorn_against_the_given_store(db_file, monkeypatch):
    import uvicorn

    calls = []
    monkeypatch.setenv("CAMPUSMART_DB_PATH", "unused.db")
    monkeypatch.setattr(uvicorn, "run", lambda app, **kw: calls.append((app, kw)))

    assert main(["--db", db_file, "serve", "--port", "8123"]) == 0
    assert calls == [("campusmart.api:app", {"host": "127.0.0.1", "port": 8123, "reload": False})]
    assert os.environ["CAMPUSMART_DB_PATH"] == db_file
