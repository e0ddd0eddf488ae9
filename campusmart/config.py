from __future__ import annotations

# campusmart/config.py
import os
import logging

import yaml

from .schema import DB_NAME

# DB path resolution order:
# 1) env CAMPUSMART_DB_PATH (highest priority)
# 2) config.yaml test_db_path (when running under tests)
# 3) config.yaml db_path
# 4) fallback: campusmart.db at the project root
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_ROOT_DB = os.path.join(_PROJECT_ROOT, DB_NAME)
_CONFIG_KEYS = ("db_path", "test_db_path", "log_level")

logger = logging.getLogger(__name__)


def config_path() -> str:
    return os.environ.get("CAMPUSMART_CONFIG") or os.path.join(_PROJECT_ROOT, "config.yaml")


def read_config_yaml(path: str | None = None) -> dict:
    cfg_path = path or config_path()
    if not os.path.exists(cfg_path):
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("ignoring unreadable config %s: %s", cfg_path, e)
        return {}
    if not isinstance(cfg, dict):
        return {}
    out = {}
    for k in _CONFIG_KEYS:
        v = cfg.get(k)
        if isinstance(v, str) and v.strip():
            out[k] = v.strip()
    return out


def is_test_env() -> bool:
    return (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)


def get_db_path() -> str:
    env_path = os.environ.get("CAMPUSMART_DB_PATH")
    cfg = read_config_yaml()

    if env_path:
        path = env_path
    elif is_test_env() and cfg.get("test_db_path"):
        path = cfg["test_db_path"]
    elif cfg.get("db_path"):
        path = cfg["db_path"]
    else:
        path = _ROOT_DB

    if path != ":memory:":
        dirn = os.path.dirname(path) or "."
        os.makedirs(dirn, exist_ok=True)
    return path


def get_log_level() -> str:
    return (os.environ.get("LOG_LEVEL") or read_config_yaml().get("log_level") or "INFO").upper()
