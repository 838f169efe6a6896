"""YAML configuration with environment overrides and validation."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from trekrank.core.exceptions import ConfigError, ConfigValidationError

# ── Paths ─────────────────────────────────────────────────────────────

_CONFIG_FILENAME = "config.yaml"

PORT_ENV = "PORT"
DEFAULT_PORT = 3000


def data_dir() -> Path:
    """Return the data directory (config file and logs).

    ``$TREKRANK_DATA_DIR`` when set, otherwise ``./data`` under the
    working directory.
    """
    override = os.environ.get("TREKRANK_DATA_DIR")
    return Path(override) if override else Path.cwd() / "data"


def config_path() -> Path:
    return data_dir() / _CONFIG_FILENAME


# ── Defaults ──────────────────────────────────────────────────────────

DEFAULT_CONFIG: Dict[str, Any] = {
    "server": {
        "host": "0.0.0.0",
        "port": DEFAULT_PORT,
    },
    "logging": {
        "level": "INFO",
        "max_file_size_mb": 10,
        "backup_count": 5,
        "to_file": True,
    },
    # None → the catalog bundled with the package
    "dataset_path": None,
}

# ── Loader ────────────────────────────────────────────────────────────


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """Recursively merge *override* into *base* (non‑destructive)."""
    merged = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def port_from_env(environ: Optional[Dict[str, str]] = None) -> Optional[int]:
    """Return the port named by ``$PORT``, or ``None`` if absent or unusable."""
    env = os.environ if environ is None else environ
    raw = env.get(PORT_ENV)
    if raw is None:
        return None
    try:
        port = int(raw.strip())
    except ValueError:
        return None
    if not (1 <= port <= 65535):
        return None
    return port


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load config from YAML, falling back to ``DEFAULT_CONFIG``.

    A missing file is not an error.  ``$PORT`` takes precedence over
    ``server.port`` when it holds a valid port number.
    """
    path = path or config_path()

    raw: Dict[str, Any] = {}
    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Cannot read {path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigError(f"{path} must contain a mapping, got {type(raw).__name__}")

    merged = _deep_merge(DEFAULT_CONFIG, raw)

    env_port = port_from_env()
    if env_port is not None:
        merged["server"] = dict(merged["server"], port=env_port)

    _validate(merged)
    return merged


# ── Validation ────────────────────────────────────────────────────────

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _validate(cfg: Dict[str, Any]) -> None:
    """Raise :class:`ConfigValidationError` on invalid values."""

    log_cfg = cfg.get("logging", {})
    ll = log_cfg.get("level", "INFO")
    if not isinstance(ll, str) or ll.upper() not in _VALID_LOG_LEVELS:
        raise ConfigValidationError(f"logging.level '{ll}' is not valid")

    srv = cfg.get("server", {})
    port = srv.get("port", DEFAULT_PORT)
    if not isinstance(port, int) or isinstance(port, bool) or not (1 <= port <= 65535):
        raise ConfigValidationError(f"server.port must be an integer 1‑65535, got {port}")

    host = srv.get("host", "")
    if not isinstance(host, str) or not host.strip():
        raise ConfigValidationError("server.host must be a non‑empty string")

    dp = cfg.get("dataset_path")
    if dp is not None and (not isinstance(dp, str) or not dp.strip()):
        raise ConfigValidationError("dataset_path must be a non‑empty string or null")
