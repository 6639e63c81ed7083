import yaml
from dataclasses import dataclass
from pathlib import Path

from pkglists import constants
from pkglists.constants import (
    DEFAULT_AUR_HELPER,
    LOG_FILE,
    PRIMARY_LIST,
    SECONDARY_LIST,
    SUPPORTED_HELPERS,
)
from pkglists.errors import ConfigError


@dataclass
class Settings:
    """Resolved locations and helper for one run."""

    base_dir: Path
    primary_list: Path
    secondary_list: Path
    log_file: Path
    aur_helper: str = DEFAULT_AUR_HELPER


def load_config(path: Path | None = None, required: bool = False) -> dict:
    """Load the optional YAML config."""
    path = path or constants.CONFIG_FILE
    if not path.exists():
        if required:
            raise ConfigError(f'Config not found: {path}')
        return {}
    with open(path) as f:
        try:
            config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f'Invalid YAML in {path}: {e}') from e
    if not isinstance(config, dict):
        raise ConfigError(f'Config must be a mapping: {path}')
    return config


def resolve_path(base_dir: Path, value) -> Path:
    """Expand ~ and anchor relative paths at base_dir."""
    path = Path(value).expanduser()
    if path.is_absolute():
        return path
    return base_dir / path


def path_setting(config: dict, key: str, default: Path):
    """Get a path-valued key, which must be a non-empty string when present."""
    if key not in config:
        return default
    value = config[key]
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f'{key} must be a path, got: {value!r}')
    return value


def load_settings(base_dir: Path | None = None, config_file: Path | None = None) -> Settings:
    """Merge CLI overrides, config file and defaults into Settings."""
    config = load_config(config_file, required=config_file is not None)

    if base_dir is None:
        base_dir = path_setting(config, 'base_dir', Path.cwd())
    base_dir = Path(base_dir).expanduser()

    helper = config.get('aur_helper', DEFAULT_AUR_HELPER)
    if helper not in SUPPORTED_HELPERS:
        raise ConfigError(f'Unsupported AUR helper: {helper}. Supported: {", ".join(SUPPORTED_HELPERS)}')

    return Settings(
        base_dir=base_dir,
        primary_list=resolve_path(base_dir, path_setting(config, 'primary_list', PRIMARY_LIST)),
        secondary_list=resolve_path(base_dir, path_setting(config, 'secondary_list', SECONDARY_LIST)),
        log_file=resolve_path(base_dir, path_setting(config, 'log_file', LOG_FILE)),
        aur_helper=helper,
    )
