#!/usr/bin/env python3
"""
Configuration management for CodeMentor.
Reads user preferences from ~/.codementor/config.json with environment overrides.

Precedence (highest first): explicit overrides (CLI flags), environment
variables, config file, defaults.
"""

import os
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Dict, Any

DEFAULTS: Dict[str, Any] = {
    'strict_selectors': False,
    'seed': None,
    'catalog_path': None,
    'history': True,
}

TRUE_VALUES = {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings"""
    strict_selectors: bool = False
    seed: Optional[int] = None
    catalog_path: Optional[str] = None
    history: bool = True


def get_config_dir() -> Path:
    """Get the CodeMentor config directory (~/.codementor or $CODEMENTOR_HOME)"""
    override = os.environ.get('CODEMENTOR_HOME')
    config_dir = Path(override).expanduser() if override else Path.home() / '.codementor'
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_path() -> Path:
    """Get the config file path"""
    return get_config_dir() / 'config.json'


def load_config() -> Dict[str, Any]:
    """Load user preferences; a missing or unreadable file means no preferences"""
    config_path = get_config_path()
    if not config_path.is_file():
        return {}
    try:
        config = json.loads(config_path.read_text(encoding='utf-8'))
    except (json.JSONDecodeError, OSError):
        return {}
    # A config file holding a list or scalar is treated as empty
    return config if isinstance(config, dict) else {}


def save_config(config: Dict[str, Any]) -> None:
    """Write user preferences back to config.json"""
    get_config_path().write_text(json.dumps(config, indent=2), encoding='utf-8')


def get_config_value(key: str, default: Any = None) -> Any:
    """Get a specific config value"""
    config = load_config()
    return config.get(key, default)


def set_config_value(key: str, value: Any) -> None:
    """Set a specific config value"""
    config = load_config()
    config[key] = value
    save_config(config)


def _env_overrides() -> Dict[str, Any]:
    """Settings taken from CODEMENTOR_* environment variables"""
    overrides: Dict[str, Any] = {}

    strict = os.environ.get('CODEMENTOR_STRICT')
    if strict is not None:
        overrides['strict_selectors'] = strict.strip().lower() in TRUE_VALUES

    seed = os.environ.get('CODEMENTOR_SEED')
    if seed:
        try:
            overrides['seed'] = int(seed)
        except ValueError:
            pass

    catalog = os.environ.get('CODEMENTOR_CATALOG')
    if catalog:
        overrides['catalog_path'] = catalog

    return overrides


def _coerce_seed(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def resolve_settings(overrides: Optional[Dict[str, Any]] = None) -> Settings:
    """
    Merge defaults, config file, environment, and explicit overrides.

    Args:
        overrides: Values from the command line; None entries are ignored

    Returns:
        Settings with every field resolved
    """
    merged = dict(DEFAULTS)
    merged.update({k: v for k, v in load_config().items() if k in DEFAULTS})
    merged.update(_env_overrides())
    if overrides:
        merged.update({k: v for k, v in overrides.items() if k in DEFAULTS and v is not None})

    return Settings(
        strict_selectors=bool(merged['strict_selectors']),
        seed=_coerce_seed(merged['seed']),
        catalog_path=str(merged['catalog_path']) if merged['catalog_path'] else None,
        history=bool(merged['history']),
    )
