"""TOML config loading and validation for steplog."""
from pathlib import Path
from typing import Any, Dict, List

from .errors import ConfigError

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULTS: Dict[str, Any] = {
    "logger": "steplog.transcript",
    "log_level": "INFO",
    "log_file": None,
    "log_format": "text",
    "fail_on_pending_deferred": True,
}


def load_toml_path(path: Path) -> Dict[str, Any]:
    try:
        with path.open("rb") as f:
            try:
                import tomllib as _toml
            except Exception:
                import tomli as _toml  # type: ignore
            return _toml.load(f)
    except FileNotFoundError:
        return {}


def read_config_file(path: Path) -> Dict[str, Any]:
    """Read a steplog TOML file; for pyproject.toml only the [tool.steplog] table."""
    cfg = load_toml_path(path)
    if path.name == "pyproject.toml":
        return cfg.get("tool", {}).get("steplog", {})
    return cfg


def discover_config(cwd: Path | None = None) -> Dict[str, Any]:
    """Find a config in ``cwd``: steplog.toml, .steplog.toml, then [tool.steplog] in pyproject.toml."""
    base = cwd or Path.cwd()
    for name in ("steplog.toml", ".steplog.toml"):
        cand = base / name
        if cand.exists():
            return load_toml_path(cand)
    pyproject = base / "pyproject.toml"
    if pyproject.exists():
        return read_config_file(pyproject)
    return {}


def load_config(path: str | Path | None = None, cwd: Path | None = None) -> Dict[str, Any]:
    """Load, validate and merge a config with the defaults.

    An explicit ``path`` must exist; otherwise the config is discovered.
    """
    if path:
        p = Path(path)
        if not p.exists():
            raise ConfigError(f"config file not found: {p}")
        cfg = read_config_file(p)
    else:
        cfg = discover_config(cwd)
    validate_config(cfg)
    return resolve_config(cfg)


def resolve_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(DEFAULTS)
    merged.update(cfg)
    return merged


def validate_config(cfg: Dict[str, Any]) -> None:
    """Validate the TOML configuration dict.

    Raises ConfigError with a helpful message when validation fails.
    Supported keys and expected types:
      - logger: str
      - log_level: 'DEBUG'|'INFO'|'WARNING'|'ERROR'|'CRITICAL'
      - log_file: str
      - log_format: 'text'|'json'
      - fail_on_pending_deferred: bool
    """
    if not isinstance(cfg, dict):
        raise ConfigError("config must be a table/object in TOML")

    def expect_type(key: str, typ, choices: List[str] | None = None):
        if key in cfg:
            val = cfg[key]
            if not isinstance(val, typ):
                raise ConfigError(f"config key '{key}' must be of type {typ.__name__}")
            if choices and val not in choices:
                raise ConfigError(f"config key '{key}' must be one of {choices}")

    expect_type("logger", str)
    expect_type("log_level", str, choices=LOG_LEVELS)
    expect_type("log_file", str)
    expect_type("log_format", str, choices=["text", "json"])
    expect_type("fail_on_pending_deferred", bool)

    unknown = sorted(set(cfg) - set(DEFAULTS))
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
