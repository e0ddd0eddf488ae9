from campusmart import config


def test_env_path_wins(monkeypatch, tmp_path):
    p = tmp_path / "sub" / "x.db"
    monkeypatch.setenv("CAMPUSMART_DB_PATH", str(p))
    assert config.get_db_path() == str(p)
    assert (tmp_path / "sub").is_dir()


def test_yaml_test_path_used_under_tests(monkeypatch, tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text(f"db_path: {tmp_path / 'prod.db'}\ntest_db_path: {tmp_path / 'test.db'}\nlog_level: debug\n",
                   encoding="utf-8")
    monkeypatch.delenv("CAMPUSMART_DB_PATH", raising=False)
    monkeypatch.setenv("CAMPUSMART_CONFIG", str(cfg))
    monkeypatch.setenv("APP_ENV", "test")
    assert config.get_db_path() == str(tmp_path / "test.db")

    monkeypatch.delenv("APP_ENV")
    monkeypatch.delenv("PYTEST_CURRENT_TEST", raising=False)
    assert config.get_db_path() == str(tmp_path / "prod.db")

    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert config.get_log_level() == "DEBUG"


def test_bad_yaml_is_ignored(monkeypatch, tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("db_path: [unclosed\n", encoding="utf-8")
    monkeypatch.setenv("CAMPUSMART_CONFIG", str(cfg))
    assert config.read_config_yaml() == {}
